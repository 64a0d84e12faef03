from pathlib import Path

from environs import Env

env = Env()
env.read_env(recurse=False)

BASE_DIR = Path(__file__).resolve().parent.parent.parent

SECRET_KEY = env.str('SECRET_KEY', 'django-insecure-6q1f#w!gshop-local-only-k2v9z0r8e3t')

ALLOWED_HOSTS = env.list('ALLOWED_HOSTS', [])

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'catalog',
    'google_shopping',
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
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'core.wsgi.application'

AUTH_PASSWORD_VALIDATORS = [
    {'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator'},
    {'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator'},
    {'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator'},
    {'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator'},
]

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {'format': '%(asctime)s %(levelname)s %(name)s: %(message)s'},
    },
    'handlers': {
        'console': {'class': 'logging.StreamHandler', 'formatter': 'simple'},
    },
    'loggers': {
        'google_shopping': {
            'handlers': ['console'],
            'level': env.str('LOG_LEVEL', 'INFO'),
        },
    },
}

# Google Content API
GOOGLE_SHOPPING_API_BASE_URL = env.str(
    'GOOGLE_SHOPPING_API_BASE_URL', 'https://shoppingcontent.googleapis.com/content/v2.1'
)
GOOGLE_SHOPPING_API_TIMEOUT = env.float('GOOGLE_SHOPPING_API_TIMEOUT', 30)
GOOGLE_SHOPPING_TOKEN_URI = env.str('GOOGLE_SHOPPING_TOKEN_URI', 'https://oauth2.googleapis.com/token')

# Seed values for the GoogleShoppingSetting row; tokens are rotated in the database afterwards
GOOGLE_SHOPPING_MERCHANT_ID = env.str('GOOGLE_SHOPPING_MERCHANT_ID', '')
GOOGLE_SHOPPING_CLIENT_ID = env.str('GOOGLE_SHOPPING_CLIENT_ID', '')
GOOGLE_SHOPPING_CLIENT_SECRET = env.str('GOOGLE_SHOPPING_CLIENT_SECRET', '')
GOOGLE_SHOPPING_REFRESH_TOKEN = env.str('GOOGLE_SHOPPING_REFRESH_TOKEN', '')

# Feed defaults; GOOGLE_SHOPPING_PRODUCT_URL is formatted with {slug} and {sku}
GOOGLE_SHOPPING_PRODUCT_URL = env.str('GOOGLE_SHOPPING_PRODUCT_URL', '')
GOOGLE_SHOPPING_CONTENT_LANGUAGE = env.str('GOOGLE_SHOPPING_CONTENT_LANGUAGE', 'en')
GOOGLE_SHOPPING_TARGET_COUNTRY = env.str('GOOGLE_SHOPPING_TARGET_COUNTRY', 'US')
GOOGLE_SHOPPING_CHANNEL = env.str('GOOGLE_SHOPPING_CHANNEL', 'online')

# Transport is swappable via env, e.g. for a sandbox proxy
GOOGLE_SHOPPING_TRANSPORT_CLASS = env.str(
    'GOOGLE_SHOPPING_TRANSPORT_CLASS', 'google_shopping.clients.content_api.ContentApiTransport'
)
# attribute name -> dotted path of a callable taking a Variant
GOOGLE_SHOPPING_ATTRIBUTE_RESOLVERS = env.dict('GOOGLE_SHOPPING_ATTRIBUTE_RESOLVERS', {})
