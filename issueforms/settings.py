"""
Настройки Django-проекта issueforms (формы выдачи оборудования LNMIIT).

Все значения, зависящие от окружения, читаются из переменных окружения
(при наличии файла .env он подхватывается через python-dotenv).
"""
import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / '.env')

SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-secret-key-change-in-production')

DEBUG = os.environ.get('DEBUG', 'True').lower() in ('true', '1', 'yes')

ALLOWED_HOSTS = [
    h.strip()
    for h in os.environ.get('ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',')
    if h.strip()
]

INSTALLED_APPS = [
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.staticfiles',
    'rest_framework',
    'main',
    'issueform1',
    'issueform2',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'whitenoise.middleware.WhiteNoiseMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'issueforms.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [BASE_DIR / 'templates'],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'main.context_processors.institute_info',
            ],
        },
    },
]

WSGI_APPLICATION = 'issueforms.wsgi.application'

# База данных формам не нужна, оставлена для служебных приложений Django
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'db.sqlite3',
    }
}

# Состояние формы живет только в сессии посетителя
CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
    }
}
SESSION_ENGINE = 'django.contrib.sessions.backends.cache'
SESSION_EXPIRE_AT_BROWSER_CLOSE = True

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'Asia/Kolkata'
USE_I18N = False
USE_TZ = True

STATIC_URL = 'static/'
STATICFILES_DIRS = [BASE_DIR / 'static']
STATIC_ROOT = BASE_DIR / 'staticfiles'

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# Аутентификации нет: API открыт так же, как и сами формы
REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': ['rest_framework.permissions.AllowAny'],
    'DEFAULT_RENDERER_CLASSES': ['rest_framework.renderers.JSONRenderer'],
    'UNAUTHENTICATED_USER': None,
}

# ==============================================================================
# Настройки форм выдачи
# ==============================================================================

# Префикс, под которым развернуты формы (аналог base-path сборки фронтенда)
URL_PREFIX = os.environ.get('URL_PREFIX', 'forms/')

_DEFAULT_SCRIPT_URL = (
    'https://script.google.com/macros/s/'
    'AKfycbz5UMlP23VRPQOzFz_nA17u3pLmgVVXOhJT70vD5qJyX_-Qabz6gxS2u6EK4sCtAnetrQ/exec'
)

# Эндпоинты Google Apps Script, куда уходят заявки
ITEM_ISSUE_SCRIPT_URL = os.environ.get('ITEM_ISSUE_SCRIPT_URL', _DEFAULT_SCRIPT_URL)
LAB_ISSUE_SCRIPT_URL = os.environ.get('LAB_ISSUE_SCRIPT_URL', _DEFAULT_SCRIPT_URL)

# Опубликованная таблица (CSV) со списком оборудования для формы 1
ITEM_CATALOG_CSV_URL = os.environ.get('ITEM_CATALOG_CSV_URL', '')

# Таймаут сетевых вызовов в секундах; не задан - ждем без ограничения
_timeout = os.environ.get('ISSUE_FORMS_HTTP_TIMEOUT')
ISSUE_FORMS_HTTP_TIMEOUT = float(_timeout) if _timeout else None

LNMIIT_EMAIL_DOMAIN = '@lnmiit.ac.in'

INSTITUTE_INFO = {
    'name': 'The LNM Institute of Information Technology',
    'tagline': 'Excellence in Technology',
    'address': 'Rupa ki Nangal, Post-Sumel, Via, Jamdoli, Jaipur, Rajasthan 302031',
    'phone': '+91-9468955596',
    'email': 'smaheshwari@lnmiit.ac.in',
}

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': False,
        },
        # Логгеры приложений пишут через корневой обработчик
        'main': {'level': 'INFO'},
        'issueform1': {'level': 'INFO'},
        'issueform2': {'level': 'INFO'},
    },
}
