"""Logging configuration for logpattern."""

import logging.config

from logpattern import config as app_config

LOGGING_CONFIG = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'standard': {
            'format': '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
        },
    },
    'handlers': {
        'default': {
            'level': 'DEBUG',
            'formatter': 'standard',
            'class': 'logging.StreamHandler',
            'stream': 'ext://sys.stdout',
        },
    },
    'loggers': {
        'logpattern': {
            'handlers': ['default'],
            'level': 'INFO',
            'propagate': False
        },
    }
}


def build_logging_config(level=None, log_file=None):
    """Return a dictConfig mapping for the given level and optional log file."""
    cfg = {
        **LOGGING_CONFIG,
        'handlers': dict(LOGGING_CONFIG['handlers']),
        'loggers': {name: dict(opts) for name, opts in LOGGING_CONFIG['loggers'].items()},
    }
    cfg['loggers']['logpattern']['level'] = str(level or app_config.LOG_LEVEL).upper()

    log_file = log_file or app_config.LOG_FILE
    if log_file:
        cfg['handlers']['file'] = {
            'level': 'DEBUG',
            'formatter': 'standard',
            'class': 'logging.FileHandler',
            'filename': log_file,
            'mode': 'a',
        }
        cfg['loggers']['logpattern']['handlers'] = ['default', 'file']

    return cfg


def setup_logging(level=None, log_file=None):
    """Set up logging configuration."""
    logging.config.dictConfig(build_logging_config(level, log_file))
