"""
Configuration for the Career Guidance Engine
Environment-driven settings for the profile store, cache, catalogs and workers
"""

import os
import logging
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)


def _env_flag(name, default='false'):
    return os.environ.get(name, default).lower() == 'true'


class Config:
    """Base configuration"""

    # Flask settings - generate secure random key if not provided
    SECRET_KEY = os.environ.get('SECRET_KEY')
    if not SECRET_KEY:
        import secrets
        SECRET_KEY = secrets.token_hex(32)
        logger.warning("Using generated SECRET_KEY. Set SECRET_KEY environment variable for production.")

    # Profile store configuration
    # PostgreSQL is recommended for production
    DATABASE_URL = os.environ.get('DATABASE_URL')

    if DATABASE_URL:
        SQLALCHEMY_DATABASE_URI = DATABASE_URL
        # Fix for Heroku postgres:// URLs
        if SQLALCHEMY_DATABASE_URI.startswith("postgres://"):
            SQLALCHEMY_DATABASE_URI = SQLALCHEMY_DATABASE_URI.replace("postgres://", "postgresql://", 1)
        SQLALCHEMY_ENGINE_OPTIONS = {
            'pool_size': 10,
            'max_overflow': 20,
            'pool_pre_ping': True,
            'pool_recycle': 3600,
            'pool_timeout': 30,
        }
    else:
        # Development database (SQLite)
        basedir = os.path.abspath(os.path.dirname(__file__))
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{os.path.join(basedir, 'career_guidance.db')}"
        SQLALCHEMY_ENGINE_OPTIONS = {
            'connect_args': {
                'check_same_thread': False,  # Allow SQLite usage across threads
                'timeout': 20
            }
        }

    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Redis (analysis cache, rate limiter storage, Celery broker)
    REDIS_URL = os.environ.get('REDIS_URL', 'redis://localhost:6379/0')
    CACHE_ENABLED = _env_flag('CACHE_ENABLED', 'true')
    ANALYSIS_CACHE_TTL = int(os.environ.get('ANALYSIS_CACHE_TTL', '300'))

    # Catalogs: optional JSON file overriding the shipped demand/role/course tables
    CAREER_CATALOG_PATH = os.environ.get('CAREER_CATALOG_PATH')

    # Rate limiting
    RATELIMIT_ENABLED = _env_flag('RATELIMIT_ENABLED', 'true')
    RATELIMIT_STORAGE_URI = os.environ.get('RATELIMIT_STORAGE_URI', 'memory://')
    RATELIMIT_DEFAULT = "200 per hour"

    # Monitoring
    METRICS_ENABLED = _env_flag('METRICS_ENABLED', 'true')

    # Metrics write-back runs through Celery when enabled
    ASYNC_PROCESSING = _env_flag('ASYNC_PROCESSING')

    # Logging
    LOG_DIR = os.environ.get('LOG_DIR', os.path.join(os.getcwd(), 'logs'))
    LOG_TO_FILE = _env_flag('LOG_TO_FILE', 'true')


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False

    # More verbose logging in development
    SQLALCHEMY_ECHO = False


class ProductionConfig(Config):
    """Production configuration with security and performance optimizations"""
    DEBUG = False
    TESTING = False

    DATABASE_URL = os.environ.get('DATABASE_URL')
    if DATABASE_URL:
        # Normalize old Heroku-style URLs
        if DATABASE_URL.startswith("postgres://"):
            DATABASE_URL = DATABASE_URL.replace("postgres://", "postgresql://", 1)
        SQLALCHEMY_DATABASE_URI = DATABASE_URL
    else:
        SQLALCHEMY_DATABASE_URI = 'postgresql://localhost/career_guidance'

    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_size': int(os.environ.get('DB_POOL_SIZE', '10')),
        'pool_timeout': int(os.environ.get('DB_POOL_TIMEOUT', '30')),
        'pool_recycle': int(os.environ.get('DB_POOL_RECYCLE', '3600')),
        'max_overflow': int(os.environ.get('DB_MAX_OVERFLOW', '20')),
        'pool_pre_ping': True
    }

    RATELIMIT_STORAGE_URI = os.environ.get('RATELIMIT_STORAGE_URI', Config.REDIS_URL)


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    DEBUG = True

    # Use in-memory database for testing
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}

    CACHE_ENABLED = False
    METRICS_ENABLED = False
    RATELIMIT_ENABLED = False
    ASYNC_PROCESSING = False
    LOG_TO_FILE = False
    CAREER_CATALOG_PATH = None


# Configuration mapping
config_map = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config():
    """Get configuration based on environment"""
    env = os.environ.get('FLASK_ENV', 'development')
    return config_map.get(env, config_map['default'])
