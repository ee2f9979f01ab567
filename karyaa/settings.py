# karyaa/settings.py

import os
from pathlib import Path
from datetime import timedelta
from dotenv import load_dotenv

load_dotenv()

# --- BASE DIR ---
BASE_DIR = Path(__file__).resolve().parent.parent


def env_bool(name, default=False):
    return os.environ.get(name, str(default)).lower() in ('true', '1', 'yes')


def env_days(name, default):
    raw = os.environ.get(name)
    if not raw:
        return default
    return tuple(int(day) for day in raw.split(',') if day.strip())


# --- SECURITY ---
SECRET_KEY = os.environ.get('SECRET_KEY', 'django-insecure-karyaa-local-development-key')
DEBUG = env_bool('DEBUG', False)
ALLOWED_HOSTS = os.environ.get('ALLOWED_HOSTS', '*').split(',')

# --- INSTALLED APPS ---
INSTALLED_APPS = [
    # Django built-ins
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'whitenoise.runserver_nostatic',
    'django.contrib.staticfiles',

    # Third-party apps
    'rest_framework',
    'corsheaders',
    'djoser',
    'django_filters',

    # Local apps
    'core',
    'users',
    'reviews',
    'banners',
    'content',
    'support',
    'maintenance',
]

# --- MIDDLEWARE ---
MIDDLEWARE = [
    'corsheaders.middleware.CorsMiddleware',
    'django.middleware.security.SecurityMiddleware',
    'whitenoise.middleware.WhiteNoiseMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

# --- CORS ---
CORS_ALLOW_HEADERS = [
    'accept',
    'accept-encoding',
    'authorization',
    'content-type',
    'dnt',
    'origin',
    'user-agent',
    'x-csrftoken',
    'x-requested-with',
]
CORS_ALLOWED_ORIGINS = os.environ.get(
    'CORS_ALLOWED_ORIGINS',
    "https://karyaa.ae,https://admin.karyaa.ae,http://localhost:5173",
).split(',')
CORS_ALLOW_CREDENTIALS = True

# --- TEMPLATES ---
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

# --- URLS & WSGI ---
ROOT_URLCONF = 'karyaa.urls'
WSGI_APPLICATION = 'karyaa.wsgi.application'

# --- DATABASE ---
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',  # Use PostgreSQL for prod
        'NAME': os.environ.get('DATABASE_PATH', BASE_DIR / 'db.sqlite3'),
    }
}

# --- AUTH ---
AUTH_USER_MODEL = 'users.CustomUser'

# --- PASSWORD VALIDATORS ---
AUTH_PASSWORD_VALIDATORS = [
    {'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator'},
    {'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator'},
    {'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator'},
    {'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator'},
]

# --- INTERNATIONALIZATION ---
LANGUAGE_CODE = 'en-us'
TIME_ZONE = os.environ.get('TIME_ZONE', 'Asia/Dubai')  # calendar days for subscription warnings
USE_I18N = True
USE_TZ = True

# --- STATIC FILES ---
STATIC_URL = '/static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'
STORAGES = {
    'default': {
        'BACKEND': 'django.core.files.storage.FileSystemStorage',
    },
    'staticfiles': {
        'BACKEND': 'whitenoise.storage.CompressedManifestStaticFilesStorage',
    },
}

# --- DEFAULT AUTO FIELD ---
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# --- REST FRAMEWORK ---
REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': (
        'rest_framework_simplejwt.authentication.JWTAuthentication',
        'rest_framework.authentication.SessionAuthentication',
    ),
    'DEFAULT_FILTER_BACKENDS': (
        'django_filters.rest_framework.DjangoFilterBackend',
    ),
    'DEFAULT_PERMISSION_CLASSES': (
        'rest_framework.permissions.IsAuthenticated',
    ),
    'EXCEPTION_HANDLER': 'core.exceptions.envelope_exception_handler',
}

# --- SIMPLE JWT ---
SIMPLE_JWT = {
    'AUTH_HEADER_TYPES': ('Bearer', 'JWT'),
    'ACCESS_TOKEN_LIFETIME': timedelta(minutes=360),
    'REFRESH_TOKEN_LIFETIME': timedelta(days=1),
}

# --- FRONTEND / ADMIN PANEL ---
FRONTEND_URL = os.environ.get('FRONTEND_URL', 'http://localhost:5173' if DEBUG else 'https://karyaa.ae')
ADMIN_PANEL_URL = os.environ.get('ADMIN_PANEL_URL', 'http://localhost:5174' if DEBUG else 'https://admin.karyaa.ae')
FRONTEND_DOMAIN = FRONTEND_URL.split('://', 1)[-1]
PROTOCOL = FRONTEND_URL.split('://', 1)[0]

DJOSER = {
    'USER_CREATE_PASSWORD_RETYPE': True,
    'LOGIN_FIELD': 'email',
    'USER_ID_FIELD': 'id',
    'TOKEN_MODEL': None,  # JWT only
    'SERIALIZERS': {
        'user_create_password_retype': 'users.serializers.CustomUserCreateSerializer',
        'user': 'users.serializers.CustomUserSerializer',
        'current_user': 'users.serializers.CustomUserSerializer',
    },

    # Link sent in the reset email, routed by the frontend
    'PASSWORD_RESET_CONFIRM_URL': 'reset-password/{uid}/{token}',
    'EMAIL': {
        'password_reset': 'users.email.CustomPasswordResetEmail',
    },
    'PERMISSIONS': {
        'password_reset': ['rest_framework.permissions.AllowAny'],
        'password_reset_confirm': ['rest_framework.permissions.AllowAny'],
        'user': ['djoser.permissions.CurrentUserOrAdmin'],
    }
}

# --- EMAIL ---
DEFAULT_FROM_EMAIL = os.environ.get('DEFAULT_FROM_EMAIL', "Karyaa <no-reply@karyaa.ae>")
SERVER_EMAIL = DEFAULT_FROM_EMAIL
ADMIN_ALERT_EMAIL = os.environ.get('ADMIN_ALERT_EMAIL', 'admin@karyaa.ae')
SUPPORT_EMAIL = os.environ.get('SUPPORT_EMAIL', 'support@karyaa.ae')

if not DEBUG:
    # --- PRODUCTION ---
    INSTALLED_APPS += ['anymail']
    EMAIL_BACKEND = "anymail.backends.brevo.EmailBackend"

    ANYMAIL = {
        "BREVO_API_KEY": os.environ.get("BREVO_API_KEY"),
    }

else:
    # --- LOCAL DEVELOPMENT ---
    if os.environ.get("USE_SMTP") == "True":
        EMAIL_BACKEND = "django.core.mail.backends.smtp.EmailBackend"
        EMAIL_HOST = os.environ.get("EMAIL_HOST", "smtp.gmail.com")
        EMAIL_PORT = int(os.environ.get("EMAIL_PORT", 587))
        EMAIL_USE_TLS = True
        EMAIL_HOST_USER = os.environ.get("EMAIL_HOST_USER")
        EMAIL_HOST_PASSWORD = os.environ.get("EMAIL_HOST_PASSWORD")
    else:
        EMAIL_BACKEND = "django.core.mail.backends.console.EmailBackend"

# --- SCHEDULED JOBS ---
SUBSCRIPTION_WARNING_DAYS = env_days('SUBSCRIPTION_WARNING_DAYS', (30, 7, 2))
ADMIN_SUBSCRIPTION_WARNING_DAYS = env_days('ADMIN_SUBSCRIPTION_WARNING_DAYS', (2,))
ENABLE_CRON_TEST_ROUTES = env_bool('ENABLE_CRON_TEST_ROUTES', DEBUG)

# --- LOGGING ---
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '{asctime} {levelname} {name}: {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': os.environ.get('LOG_LEVEL', 'INFO'),
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': os.environ.get('DJANGO_LOG_LEVEL', 'WARNING'),
            'propagate': False,
        },
    },
}
