import os
from datetime import timedelta
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

BASE_DIR = os.path.abspath(os.path.dirname(__file__))


def _env_flag(name, default):
    return os.environ.get(name, default).lower() == 'true'


def _env_float(name):
    value = os.environ.get(name)
    return float(value) if value else None


class Config:
    """Base configuration class."""
    SECRET_KEY = os.environ.get('SECRET_KEY')
    SITE_NAME = os.environ.get('SITE_NAME', 'vhionex')

    # Portfolio content (configurable via environment variables)
    CONTENT_DIR = os.environ.get('CONTENT_DIR', os.path.join(BASE_DIR, 'content'))
    PORTFOLIO_CSV_PATH = os.environ.get(
        'PORTFOLIO_CSV_PATH', os.path.join(CONTENT_DIR, 'data', 'portfolio.csv'))
    # "local" reads PORTFOLIO_CSV_PATH, "remote" fetches PORTFOLIO_CSV_URL
    PORTFOLIO_SOURCE = os.environ.get('PORTFOLIO_SOURCE', 'local')
    PORTFOLIO_CSV_URL = os.environ.get('PORTFOLIO_CSV_URL')
    PORTFOLIO_FETCH_TIMEOUT = _env_float('PORTFOLIO_FETCH_TIMEOUT')  # None waits indefinitely
    PORTFOLIO_CACHE_ENABLED = _env_flag('PORTFOLIO_CACHE_ENABLED', 'true')
    RECENT_PROJECTS_COUNT = int(os.environ.get('RECENT_PROJECTS_COUNT', '3'))
    PLACEHOLDER_IMAGE = os.environ.get('PLACEHOLDER_IMAGE', '/static/img/placeholder.svg')

    # Application settings
    DEBUG = False
    TESTING = False

    # Session configuration
    SESSION_COOKIE_SECURE = True  # Only send cookies over HTTPS
    SESSION_COOKIE_HTTPONLY = True  # Prevent XSS attacks
    SESSION_COOKIE_SAMESITE = 'Lax'  # CSRF protection

    # Cache settings (configurable via environment variables)
    CACHE_TYPE = 'SimpleCache'
    CACHE_DEFAULT_TIMEOUT = int(os.environ.get('CACHE_DEFAULT_TIMEOUT', '300'))  # 5 minutes default

    # Lead form delivery (EmailJS). Without credentials, submissions fail
    # unless LEADS_LOG_ONLY is set.
    EMAILJS_SERVICE_ID = os.environ.get('EMAILJS_SERVICE_ID')
    EMAILJS_TEMPLATE_ID = os.environ.get('EMAILJS_TEMPLATE_ID')
    EMAILJS_PUBLIC_KEY = os.environ.get('EMAILJS_PUBLIC_KEY')
    CONTACT_EMAIL = os.environ.get('CONTACT_EMAIL')
    # Country assumed for lead phone numbers typed without "+", e.g. "GB"
    PHONE_DEFAULT_REGION = os.environ.get('PHONE_DEFAULT_REGION') or None
    LEAD_RATE_LIMIT = os.environ.get('LEAD_RATE_LIMIT', '5 per minute')
    LEADS_LOG_ONLY = False


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-secret-key-do-not-use-in-production')
    SESSION_COOKIE_SECURE = _env_flag('SESSION_COOKIE_SECURE', 'false')  # Allow HTTP in development
    # Re-read the CSV on every request so content edits show immediately
    PORTFOLIO_CACHE_ENABLED = _env_flag('PORTFOLIO_CACHE_ENABLED', 'false')
    CACHE_TYPE = 'NullCache'
    LEADS_LOG_ONLY = True


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SECRET_KEY = 'test-secret-key-do-not-use-in-production'
    SESSION_COOKIE_SECURE = False  # Allow HTTP in testing
    PORTFOLIO_SOURCE = 'local'
    PORTFOLIO_CACHE_ENABLED = True
    CACHE_TYPE = 'NullCache'
    EMAILJS_SERVICE_ID = None
    EMAILJS_TEMPLATE_ID = None
    EMAILJS_PUBLIC_KEY = None
    LEADS_LOG_ONLY = True


class ProductionConfig(Config):
    """Production configuration."""
    # Explicitly disable debug mode in production
    DEBUG = False

    # Ensure HTTPS in production
    SESSION_COOKIE_SECURE = True

    # Additional production security headers
    SEND_FILE_MAX_AGE_DEFAULT = timedelta(hours=1)


def validate_settings(settings):
    """Reject missing or placeholder settings in a loaded app config."""
    secret_key = settings.get('SECRET_KEY')
    if not secret_key:
        raise ValueError("SECRET_KEY environment variable must be set")
    if secret_key in ['CHANGE_THIS_SECRET_KEY', 'your-secret-key-here']:
        raise ValueError("SECRET_KEY must be changed from the default placeholder value")

    source = settings.get('PORTFOLIO_SOURCE')
    if source not in ('local', 'remote'):
        raise ValueError("PORTFOLIO_SOURCE must be 'local' or 'remote'")
    if source == 'remote' and not settings.get('PORTFOLIO_CSV_URL'):
        raise ValueError("PORTFOLIO_CSV_URL must be set when PORTFOLIO_SOURCE is 'remote'")


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig
}
