import configparser
import os.path

from twisted.python import log

from ldifwriter.insensitive import InsensitiveString

DEFAULTS = {
    'ldif': {'version-header': 'yes',
             },
    }

CONFIG_FILES = [
    '/etc/ldifwriter/global.cfg',
    os.path.expanduser('~/.ldifwriter/global.cfg'),
    ]

CONFIG_ENVIRONMENT = 'LDIFWRITER_CONFIG'

__config = None


def getConfigFiles():
    """
    Default configuration files, followed by any listed in the
    LDIFWRITER_CONFIG environment variable.
    """
    files = list(CONFIG_FILES)
    extra = os.environ.get(CONFIG_ENVIRONMENT)
    if extra:
        files.extend([x for x in extra.split(os.pathsep) if x])
    return files


def loadConfig(configFiles=None,
               reload=False):
    """
    Load configuration file.
    """
    global __config
    if __config is None or reload:
        x = configparser.ConfigParser()
        x.optionxform = InsensitiveString

        for section, options in DEFAULTS.items():
            x.add_section(section)
            for option, value in options.items():
                x.set(section, option, value)

        if configFiles is None:
            configFiles = getConfigFiles()
        read = x.read(configFiles)
        log.msg('Loaded LDIF configuration from %r' % (read,), debug=True)
        __config = x
    return __config


def useVersionHeader():
    """
    Read configuration file if necessary and return whether
    LDIF documents start with a version line.
    """
    cfg = loadConfig()
    return cfg.getboolean('ldif', 'version-header')
