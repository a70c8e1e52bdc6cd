"""
Logging configuration for the gravity sandbox.

Call setup_logging() once from the entry point before the simulation is
built; library modules only ever ask for `logging.getLogger(__name__)`.
"""

import logging
import logging.config
from pathlib import Path


def setup_logging(default_level=logging.INFO, log_dir="logs"):
    """
    Configure console and rotating-file logging.

    Parameters
    ----------
    default_level : int or str, optional
        Level for the root logger. Default is logging.INFO.
    log_dir : str, optional
        Directory to store log files. Default is "logs".
    """
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    config = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'standard': {
                'format': '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S'
            },
            'detailed': {
                'format': '%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S'
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'level': 'INFO',
                'formatter': 'standard',
                'stream': 'ext://sys.stdout',
            },
            'file': {
                'class': 'logging.handlers.RotatingFileHandler',
                'level': 'DEBUG',
                'formatter': 'detailed',
                'filename': str(log_path / 'simulation.log'),
                'maxBytes': 10485760,  # 10 MB
                'backupCount': 5,
                'encoding': 'utf8'
            },
        },
        'loggers': {
            '': {  # root logger
                'handlers': ['console', 'file'],
                'level': default_level,
            },
        }
    }

    logging.config.dictConfig(config)
    logging.getLogger(__name__).debug("Logging configuration applied")
