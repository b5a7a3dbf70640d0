import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Base configuration."""
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    # CSRF Configuration
    WTF_CSRF_ENABLED = True
    WTF_CSRF_CHECK_DEFAULT = True
    WTF_CSRF_TIME_LIMIT = 3600  # 1 hour

    # Database - Using SQLite for easy local development
    basedir = os.path.dirname(os.path.dirname(__file__))
    INSTANCE_DIR = os.path.join(basedir, 'instance')
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        f'sqlite:///{os.path.join(INSTANCE_DIR, "janatar_bhasha.db")}'
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Upload Configuration
    MAX_CONTENT_LENGTH = 50 * 1024 * 1024  # 50MB max PDF size

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # "Today" is decided in this zone when picking the current e-paper
    EPAPER_TIMEZONE = os.environ.get('EPAPER_TIMEZONE', 'UTC')

    # Delete the stored PDF together with its e-paper record
    EPAPER_DELETE_STORED_FILES = os.environ.get('EPAPER_DELETE_STORED_FILES', 'False').lower() == 'true'

    # Object storage (any S3 compatible endpoint)
    STORAGE_BUCKET = os.environ.get('STORAGE_BUCKET', 'janatar-bhasha-epapers')
    STORAGE_REGION = os.environ.get('STORAGE_REGION', 'us-east-1')
    STORAGE_ENDPOINT_URL = os.environ.get('STORAGE_ENDPOINT_URL')
    STORAGE_ACCESS_KEY_ID = os.environ.get('STORAGE_ACCESS_KEY_ID')
    STORAGE_SECRET_ACCESS_KEY = os.environ.get('STORAGE_SECRET_ACCESS_KEY')
    STORAGE_PUBLIC_URL = os.environ.get('STORAGE_PUBLIC_URL')
    STORAGE_UPLOAD_FOLDER = os.environ.get('STORAGE_UPLOAD_FOLDER', 'pdfs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    SQLALCHEMY_ECHO = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    WTF_CSRF_ENABLED = False
    BCRYPT_LOG_ROUNDS = 4
    STORAGE_BUCKET = 'test-bucket'
    STORAGE_PUBLIC_URL = 'https://cdn.example.test'


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
