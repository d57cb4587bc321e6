import logging
import os
from typing import Mapping

DEFAULT_LOGGING_OPTIONS = {
    'version': 1,
    'formatters': {
        'full': {
            'format': '%(levelname)s|%(asctime)s|%(threadName)s|%(name)s|%(message)s'
        },
        'messageonly': {
            'format': '%(message)s'
        }
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'level': 'INFO',
            'formatter': 'messageonly',
            'stream': 'ext://sys.stderr'
        },
    },
    'loggers': {
        '__main__': {
            'level': 'DEBUG',
            'handlers': ['console'],
            'propagate': False
        },
        'solidpod': {
            'level': 'DEBUG',
            'handlers': ['console'],
            'propagate': False
        },
        # keep connection pool chatter out of the console
        'urllib3': {
            'level': 'WARNING',
        }
    },
    'root': {
        'level': 'DEBUG'
    }
}
logger = logging.getLogger(__name__)


def add_file_handler(logging_options: dict, filename: str) -> dict:
    """Add a DEBUG-level file handler with the full format to the `__main__`
    and `solidpod` loggers of `logging_options`. Modifies and returns the
    given dictionary."""
    logging_options['handlers']['file'] = {
        'class': 'logging.FileHandler',
        'level': 'DEBUG',
        'formatter': 'full',
        'filename': filename,
    }
    for name in ('__main__', 'solidpod'):
        handlers = logging_options['loggers'][name]['handlers']
        if 'file' not in handlers:
            handlers.append('file')
    return logging_options


def envsubst(value: str | list | dict, env: Mapping[str, str] = None) -> str | list | dict:
    """
    Recursively replace `${VAR_NAME}` placeholders in value with the values of the
    corresponding keys of env. If env is not given, it defaults to the environment
    variables in os.environ.

    Any placeholders that do not have a corresponding key in the env dictionary
    are left as is.

    :param value: String, list, or dictionary to search for `${VAR_NAME}` placeholders.
    :param env: Dictionary of values to use as replacements. If not given, defaults
        to `os.environ`.
    :return: If `value` is a string, returns the result of replacing `${VAR_NAME}` with the
        corresponding `value` from env. If `value` is a list or dictionary, returns a new
        list or dictionary with `envsubst()` applied to each item.
    """
    if env is None:
        env = os.environ
    if isinstance(value, str):
        if '${' in value:
            try:
                return value.replace('${', '{').format(**env)
            except KeyError as e:
                missing_key = str(e.args[0])
                logger.warning(f'Environment variable ${{{missing_key}}} not found')
                # for a missing key, just return the string without substitution
                return envsubst(value, {missing_key: f'${{{missing_key}}}', **env})
        else:
            return value
    elif isinstance(value, list):
        return [envsubst(v, env) for v in value]
    elif isinstance(value, dict):
        return {k: envsubst(v, env) for k, v in value.items()}
    else:
        return value


def strtobool(val: str) -> int:
    """Convert a string representation of truth to true (1) or false (0).

    True values are 'y', 'yes', 't', 'true', 'on', and '1'; false values
    are 'n', 'no', 'f', 'false', 'off', and '0'.  Raises ValueError if
    'val' is anything else."""
    val = val.lower()
    if val in ('y', 'yes', 't', 'true', 'on', '1'):
        return 1
    elif val in ('n', 'no', 'f', 'false', 'off', '0'):
        return 0
    else:
        raise ValueError("invalid truth value %r" % (val,))
