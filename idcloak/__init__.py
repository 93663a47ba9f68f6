from .alphabet import DEFAULT_ALPHABET, shuffle
from .blocklist import DEFAULT_BLOCKLIST, Blocklist, load_blocklist_file
from .codec import IdCloak, new, default_options
from .errors import (
    IdCloakError,
    IdCloakOptionError,
    IdCloakEncodeError,
    IdCloakDecodeError,
    InvalidOptionError,
    InvalidAlphabetError,
    InvalidBlocklistEntryError,
    InvalidMinLengthError,
    InvalidNumberError,
    MaxAttemptsExceededError,
    InvalidIdentifierError,
    InvalidSymbolError,
)

__all__ = (
    'DEFAULT_ALPHABET',
    'DEFAULT_BLOCKLIST',
    'Blocklist',
    'IdCloak',
    'new',
    'default_options',
    'shuffle',
    'load_blocklist_file',
    'IdCloakError',
    'IdCloakOptionError',
    'IdCloakEncodeError',
    'IdCloakDecodeError',
    'InvalidOptionError',
    'InvalidAlphabetError',
    'InvalidBlocklistEntryError',
    'InvalidMinLengthError',
    'InvalidNumberError',
    'MaxAttemptsExceededError',
    'InvalidIdentifierError',
    'InvalidSymbolError',
)
