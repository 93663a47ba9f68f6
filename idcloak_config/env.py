import os.path

from dotenv import load_dotenv
from validr import Compiler, Invalid, T, fields, modelclass


compiler = Compiler()


@modelclass(compiler=compiler)
class ConfigModel:
    pass


class EnvConfig(ConfigModel):
    debug: bool = T.bool.default(False).desc('debug')
    log_level: str = T.enum('DEBUG,INFO,WARNING,ERROR').default('INFO')
    alphabet: str = T.str.optional.desc('id alphabet, default a-z A-Z 0-9')
    min_length: int = T.int.min(0).default(0).desc('minimum id length')
    blocklist_enable: bool = T.bool.default(True).desc('filter ids by blocklist or not')
    blocklist_path: str = T.str.optional.desc('word list file, one word per line')

    def __post_init__(self):
        if self.blocklist_path:
            path = os.path.abspath(os.path.expanduser(self.blocklist_path))
            if not os.path.isfile(path):
                raise Invalid(f'blocklist_path {self.blocklist_path!r} not exists')
            self.blocklist_path = path
        if self.debug:
            self.log_level = 'DEBUG'


def load_env_config() -> EnvConfig:
    envfile_path = os.getenv('IDCLOAK_CONFIG')
    if envfile_path:
        envfile_path = os.path.abspath(os.path.expanduser(envfile_path))
        load_dotenv(envfile_path)
    configs = {}
    for name in fields(EnvConfig):
        key = ('IDCLOAK_' + name).upper()
        configs[name] = os.environ.get(key, None)
    return EnvConfig(configs)


CONFIG = load_env_config()
