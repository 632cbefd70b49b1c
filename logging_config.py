"""Logging Configuration for Production and Development"""

import logging
import logging.config
import os
from datetime import datetime


def setup_logging(app):
    """Setup structured logging for the Flask application"""

    handlers = {
        'console': {
            'class': 'logging.StreamHandler',
            'level': 'DEBUG' if app.debug else 'INFO',
            'formatter': 'simple',
            'stream': 'ext://sys.stdout'
        }
    }
    root_handlers = ['console']

    if app.config.get('LOG_TO_FILE', True):
        # Create logs directory if it doesn't exist
        log_dir = app.config.get('LOG_DIR') or os.path.join(os.getcwd(), 'logs')
        os.makedirs(log_dir, exist_ok=True)

        # Generate log file names with timestamp
        timestamp = datetime.now().strftime('%Y%m%d')

        handlers['file_info'] = {
            'class': 'logging.handlers.RotatingFileHandler',
            'level': 'INFO',
            'formatter': 'detailed',
            'filename': os.path.join(log_dir, f'career_info_{timestamp}.log'),
            'maxBytes': 10485760,  # 10MB
            'backupCount': 5,
            'encoding': 'utf8'
        }
        handlers['file_error'] = {
            'class': 'logging.handlers.RotatingFileHandler',
            'level': 'ERROR',
            'formatter': 'detailed',
            'filename': os.path.join(log_dir, f'career_error_{timestamp}.log'),
            'maxBytes': 10485760,  # 10MB
            'backupCount': 10,
            'encoding': 'utf8'
        }
        root_handlers = ['console', 'file_info', 'file_error']

    logging_config = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'detailed': {
                'format': '[%(asctime)s] %(levelname)s in %(module)s [%(pathname)s:%(lineno)d]: %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S'
            },
            'simple': {
                'format': '[%(asctime)s] %(levelname)s: %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S'
            }
        },
        'handlers': handlers,
        'loggers': {
            '': {  # Root logger
                'handlers': root_handlers,
                'level': 'DEBUG' if app.debug else 'INFO',
                'propagate': False
            },
            'werkzeug': {
                'handlers': ['file_info'] if 'file_info' in handlers else ['console'],
                'level': 'INFO',
                'propagate': False
            },
            'sqlalchemy.engine': {
                'handlers': ['console'],
                'level': 'INFO' if app.config.get('SQLALCHEMY_ECHO') else 'WARNING',
                'propagate': False
            }
        }
    }

    # Apply logging configuration
    logging.config.dictConfig(logging_config)

    # Set Flask app logger
    app.logger.setLevel(logging.DEBUG if app.debug else logging.INFO)

    app.logger.info("Logging configuration initialized")

    return app.logger
