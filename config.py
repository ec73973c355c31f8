"""
Configuration - Environment-driven settings for the portfolio site
Select a class with FLASK_ENV ('development', 'production', 'testing').
"""

import os
from datetime import timedelta

basedir = os.path.abspath(os.path.dirname(__file__))

MB = 1024 * 1024


def _database_uri():
    """DATABASE_URL with the legacy postgres:// scheme normalised; SQLite file otherwise"""
    url = os.environ.get('DATABASE_URL')
    if url and url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)
    return url or 'sqlite:///' + os.path.join(basedir, 'portfolio.db')


class Config:
    """Settings shared by every environment"""

    # Session
    SECRET_KEY = os.environ.get('SESSION_SECRET', 'CHANGE-THIS-SECRET-KEY-IN-PRODUCTION')
    PERMANENT_SESSION_LIFETIME = timedelta(days=7)
    REMEMBER_COOKIE_DURATION = timedelta(days=14)
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    SESSION_COOKIE_SECURE = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Content database
    SQLALCHEMY_DATABASE_URI = _database_uri()
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_size': 10,
        'pool_recycle': 3600,
        'pool_pre_ping': True,
    }
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Media uploads: per-kind limits are checked in utils.storage,
    # MAX_CONTENT_LENGTH caps the whole request body
    UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER', os.path.join(basedir, 'static', 'uploads'))
    STORAGE_PUBLIC_URL = os.environ.get('STORAGE_PUBLIC_URL', '/static/uploads')
    MAX_IMAGE_SIZE = 5 * MB
    MAX_VIDEO_SIZE = 50 * MB
    MAX_CONTENT_LENGTH = 64 * MB

    # Admin account created at startup when both are set
    ADMIN_EMAIL = os.environ.get('ADMIN_EMAIL')
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD')

    # Contact relay (Resend)
    RESEND_API_KEY = os.environ.get('RESEND_API_KEY')
    RESEND_API_URL = os.environ.get('RESEND_API_URL', 'https://api.resend.com/emails')
    CONTACT_RECIPIENT_EMAIL = os.environ.get('CONTACT_RECIPIENT_EMAIL', 'owner@example.com')
    CONTACT_SENDER = os.environ.get('CONTACT_SENDER', 'Portfolio Contact <onboarding@resend.dev>')
    EMAIL_TIMEOUT = int(os.environ.get('EMAIL_TIMEOUT', '10'))

    # Public site metadata (SEO tags, JSON-LD, robots and sitemap)
    SITE_URL = os.environ.get('SITE_URL', 'http://localhost:5000').rstrip('/')
    SITE_OWNER_NAME = os.environ.get('SITE_OWNER_NAME', 'Your Name')
    SITE_OWNER_TITLE = os.environ.get('SITE_OWNER_TITLE', 'Software Engineer')
    SITE_OWNER_DESCRIPTION = os.environ.get(
        'SITE_OWNER_DESCRIPTION',
        'Software Engineer and Full Stack Developer passionate about building exceptional digital experiences.'
    )


class DevelopmentConfig(Config):
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = True
    REMEMBER_COOKIE_SECURE = True


class TestingConfig(Config):
    """In-memory database, fixed site URL and a fake email key"""
    DEBUG = True
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    # SQLite's StaticPool rejects pool_size and friends
    SQLALCHEMY_ENGINE_OPTIONS = {}
    RESEND_API_KEY = 're_test_key'
    CONTACT_RECIPIENT_EMAIL = 'owner@example.com'
    SITE_URL = 'https://portfolio.test'
    ADMIN_EMAIL = None
    ADMIN_PASSWORD = None


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(config_name=None):
    """Config class by name, falling back to FLASK_ENV and then development"""
    env = config_name or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
