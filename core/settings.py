"""
Django settings for the business documents / revenue project.

Values are read from the environment (or a .env file) through python-decouple.
"""

from pathlib import Path
import sys

from decouple import config, Csv

from core.database import database_config


# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent


# =============================================================================
# CORE SETTINGS
# =============================================================================

SECRET_KEY = config('SECRET_KEY', default='django-insecure-change-me-in-production')
DEBUG = config('DEBUG', default=False, cast=bool)
ALLOWED_HOSTS = config('ALLOWED_HOSTS', default='localhost,127.0.0.1,testserver', cast=Csv())


# =============================================================================
# APPLICATION DEFINITION
# =============================================================================

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',

    # Local apps
    'apps.currency.apps.CurrencyConfig',
    'apps.billing.apps.BillingConfig',

    # Third-party
    'rest_framework',
    'drf_spectacular',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'core.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'core.wsgi.application'


# =============================================================================
# DATABASE
# =============================================================================

# Server-side limit for a single query, in seconds (PostgreSQL only)
DATABASE_STATEMENT_TIMEOUT = config('DATABASE_STATEMENT_TIMEOUT', default=10.0, cast=float)

DATABASES = {
    'default': database_config(
        config('DATABASE_URL', default=f'sqlite:///{BASE_DIR / "db.sqlite3"}'),
        statement_timeout=DATABASE_STATEMENT_TIMEOUT,
    )
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'


# =============================================================================
# INTERNATIONALIZATION
# =============================================================================

LANGUAGE_CODE = 'en-us'
TIME_ZONE = config('TIME_ZONE', default='UTC')
USE_I18N = True
USE_TZ = True

STATIC_URL = '/static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'


# =============================================================================
# DJANGO REST FRAMEWORK
# =============================================================================

REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [
        'rest_framework.authentication.SessionAuthentication',
        'rest_framework.authentication.BasicAuthentication',
    ],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.IsAuthenticatedOrReadOnly',
    ],
    'DEFAULT_SCHEMA_CLASS': 'drf_spectacular.openapi.AutoSchema',
}

SPECTACULAR_SETTINGS = {
    'TITLE': 'Business Documents Revenue API',
    'DESCRIPTION': 'Multi-currency revenue series and dashboard metrics for business documents.',
    'VERSION': '0.1.0',
    'SERVE_INCLUDE_SCHEMA': False,
    'SCHEMA_PATH_PREFIX': r'/api/',
}


# =============================================================================
# CURRENCY TABLE
# =============================================================================

# Sources are tried in order; the first one that yields a valid table wins.
# Available: settings, file, http
CURRENCY_TABLE_SOURCES = config('CURRENCY_TABLE_SOURCES', default='settings', cast=Csv())
CURRENCY_TABLE_FILE = config('CURRENCY_TABLE_FILE', default='')
CURRENCY_TABLE_URL = config('CURRENCY_TABLE_URL', default='')
CURRENCY_TABLE_TIMEOUT = config('CURRENCY_TABLE_TIMEOUT', default=10, cast=int)

# Rates are units per one base unit (approximate values, update regularly)
CURRENCY_BASE = 'USD'
CURRENCY_TABLE = {
    'USD': {
        'rate_to_base': '1',
        'fraction_digits': 2,
        'locale': 'en_US',
        'display_name': 'US Dollars',
    },
    'UGX': {
        'rate_to_base': '3750',
        'fraction_digits': 0,
        'locale': 'en_UG',
        'display_name': 'Uganda Shillings',
    },
    'KES': {
        'rate_to_base': '130',
        'fraction_digits': 0,
        'locale': 'en_KE',
        'display_name': 'Kenya Shillings',
    },
}


# =============================================================================
# REVENUE DASHBOARD
# =============================================================================

REVENUE_DEFAULT_MONTHS = config('REVENUE_DEFAULT_MONTHS', default=6, cast=int)
REVENUE_MAX_MONTHS = config('REVENUE_MAX_MONTHS', default=24, cast=int)
REVENUE_DEFAULT_CURRENCY = config('REVENUE_DEFAULT_CURRENCY', default='UGX')
REVENUE_QUERY_TIMEOUT = config('REVENUE_QUERY_TIMEOUT', default=10.0, cast=float)


# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL = config('LOG_LEVEL', default='INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'standard': {
            'format': '%(asctime)s %(levelname)s %(name)s :: %(message)s',
            'datefmt': '%Y-%m-%d %H:%M:%S',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'standard',
        },
    },
    'loggers': {
        'apps': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': True,
        },
    },
}


# =============================================================================
# TESTING
# =============================================================================

if 'pytest' in sys.modules or 'test' in sys.argv:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': BASE_DIR / 'test_db.sqlite3',
        }
    }
    CURRENCY_TABLE_SOURCES = ['settings']
    PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']
