"""
Configuration settings for the authdash web application
"""
import os
from datetime import timedelta


class Config:
    """Flask application configuration"""
    
    # Session secret, used to sign the session id cookie
    SECRET_KEY = os.environ.get('SESSION_SECRET') or os.environ.get('SECRET_KEY') or \
        'dev-secret-key-change-in-production-12345'
    
    # Database configuration (users and sessions live in the same store)
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'authdash.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    
    PORT = int(os.environ.get('PORT', 3000))
    
    # Server-side sessions, refreshed on every request
    SESSION_COOKIE_NAME = 'authdash.sid'
    SESSION_COOKIE_HTTPONLY = True
    SESSION_REFRESH_EACH_REQUEST = True
    PERMANENT_SESSION_LIFETIME = timedelta(minutes=int(os.environ.get('SESSION_LIFETIME_MINUTES', 60)))
    
    # Password hashing (werkzeug.security)
    PASSWORD_HASH_METHOD = os.environ.get('PASSWORD_HASH_METHOD') or 'pbkdf2:sha256:600000'
    PASSWORD_SALT_LENGTH = 16
    
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    PASSWORD_HASH_METHOD = 'pbkdf2:sha256:1000'
    LOG_LEVEL = 'DEBUG'
