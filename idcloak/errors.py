"""
IdCloak errors

    IdCloakError
    ├── IdCloakOptionError
    │   ├── InvalidOptionError
    │   ├── InvalidAlphabetError
    │   ├── InvalidBlocklistEntryError
    │   └── InvalidMinLengthError
    ├── IdCloakEncodeError
    │   ├── InvalidNumberError
    │   └── MaxAttemptsExceededError
    └── IdCloakDecodeError
        └── InvalidIdentifierError
            └── InvalidSymbolError
"""


class IdCloakError(Exception):
    """IdCloak Error"""


class IdCloakOptionError(IdCloakError):
    """IdCloak Option Error"""


class InvalidOptionError(IdCloakOptionError):
    """Unknown or malformed option"""


class InvalidAlphabetError(IdCloakOptionError):
    """Alphabet too short, multibyte or not unique"""


class InvalidBlocklistEntryError(IdCloakOptionError):
    """Blocklist is not a list of words"""


class InvalidMinLengthError(IdCloakOptionError):
    """min_length is not a non-negative integer"""


class IdCloakEncodeError(IdCloakError):
    """IdCloak Encode Error"""


class InvalidNumberError(IdCloakEncodeError):
    """Number is not a non-negative integer"""


class MaxAttemptsExceededError(IdCloakEncodeError):
    """Reached max attempts to re-generate the id"""


class IdCloakDecodeError(IdCloakError):
    """IdCloak Decode Error"""


class InvalidIdentifierError(IdCloakDecodeError):
    """Malformed identifier"""


class InvalidSymbolError(InvalidIdentifierError):
    """Symbol not in alphabet"""
