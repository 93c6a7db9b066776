import os
import secrets
import logging
from dotenv import load_dotenv
from typing import Optional

# Find the absolute path of the root directory
basedir = os.path.abspath(os.path.dirname(__file__))

# Load the .env file from the root directory
load_dotenv(os.path.join(basedir, '.env'))

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid"""
    pass


class Config:
    """
    Base configuration class. Contains default configuration settings
    and settings applicable to all environments.
    """
    # Flask settings - generate a random key if none is provided
    SECRET_KEY = os.environ.get('SECRET_KEY') or secrets.token_hex(32)
    FLASK_ENV = os.environ.get('FLASK_ENV')

    # Database settings
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'media_ranker.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Catalog settings
    TOP_WORKS_LIMIT = int(os.environ.get('TOP_WORKS_LIMIT') or 10)

    # Session configuration - Redis-backed sessions support multiple workers
    SESSION_TYPE = 'redis'
    SESSION_PERMANENT = False
    SESSION_KEY_PREFIX = 'media_ranker:'
    SESSION_COOKIE_NAME = 'media_ranker_session'
    SESSION_COOKIE_SECURE = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    PERMANENT_SESSION_LIFETIME = 86400  # 24 hours

    REQUIRED_ENV_VARS = ()

    @classmethod
    def validate_required_config(cls) -> None:
        """Validate that all required configuration is present"""
        if os.environ.get('SKIP_ENV_VALIDATION'):
            return

        missing_vars = [var for var in cls.REQUIRED_ENV_VARS if not os.environ.get(var)]
        if missing_vars:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing_vars)}"
            )

    @classmethod
    def init_app(cls, app):
        """Set up server-side sessions, Redis first and filesystem otherwise"""
        import redis
        from flask_session import Session

        redis_url = (
            os.environ.get('REDIS_URL') or
            app.config.get('REDIS_URL') or
            'redis://localhost:6379/0'
        )

        # Never log credentials embedded in the URL
        logger.info(f"Using Redis URL: {redis_url.split('@')[1] if '@' in redis_url else redis_url}")

        try:
            if redis_url.startswith('rediss://'):
                # SSL connection for managed Redis
                app.config['SESSION_REDIS'] = redis.from_url(
                    redis_url,
                    ssl_cert_reqs=None,
                    decode_responses=False
                )
            else:
                app.config['SESSION_REDIS'] = redis.from_url(redis_url, decode_responses=False)

            app.config['SESSION_REDIS'].ping()
            logger.info("Redis connection successful for Flask-Session")
        except redis.RedisError as e:
            logger.error(f"Failed to connect to Redis for sessions: {e}")
            app.config['SESSION_TYPE'] = 'cachelib'
            app.config['SESSION_CACHELIB'] = _filesystem_cache(app.instance_path)
            logger.warning("Falling back to filesystem sessions")

        Session(app)


def _filesystem_cache(directory: str):
    from cachelib import FileSystemCache
    os.makedirs(directory, exist_ok=True)
    return FileSystemCache(os.path.join(directory, 'sessions'), threshold=500)


class DevelopmentConfig(Config):
    """Development environment configuration"""
    DEBUG = True
    TESTING = False

    SQLALCHEMY_DATABASE_URI = os.environ.get('DEV_DATABASE_URL') or \
        Config.SQLALCHEMY_DATABASE_URI


class TestingConfig(Config):
    """Testing environment configuration"""
    TESTING = True
    DEBUG = False

    # Use in-memory SQLite for tests
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'

    SECRET_KEY = 'testing-secret-key'

    @classmethod
    def init_app(cls, app):
        """Testing-specific initialization"""
        # Skip Redis; cachelib keeps sessions in a throwaway directory
        import tempfile
        from flask_session import Session

        app.config['SESSION_TYPE'] = 'cachelib'
        app.config['SESSION_PERMANENT'] = False
        app.config['SESSION_KEY_PREFIX'] = 'test_session:'
        app.config['SESSION_CACHELIB'] = _filesystem_cache(tempfile.mkdtemp(prefix='media_ranker_'))

        Session(app)
        logger.info("Testing mode: Using cachelib filesystem sessions")


class ProductionConfig(Config):
    """Production environment configuration"""
    DEBUG = False
    TESTING = False

    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', '')

    # Security settings for production
    SESSION_COOKIE_SECURE = True

    REDIS_URL = os.environ.get('REDIS_URL', '')

    REQUIRED_ENV_VARS = ('SECRET_KEY', 'DATABASE_URL')

    @classmethod
    def init_app(cls, app):
        """Production-specific initialization"""
        cls.validate_required_config()
        Config.init_app(app)

        # Log to syslog in production
        from logging.handlers import SysLogHandler
        syslog_handler = SysLogHandler()
        syslog_handler.setLevel(logging.WARNING)
        app.logger.addHandler(syslog_handler)


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig
}


def get_config(config_name: Optional[str] = None) -> type:
    """Get configuration class based on environment"""
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    return config.get(config_name, DevelopmentConfig)
