# pager/pager/settings.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: pager/pager/settings.py
# Назначение: глобальные настройки проекта Django + условная интеграция
# django-debug-toolbar. Секреты и переключатели — из .env.
# ─────────────────────────────────────────────────────────────────────────────

from pathlib import Path  # работа с путями
import os                 # переменные окружения
import socket             # для INTERNAL_IPS в Docker/WSL
from dotenv import load_dotenv  # загрузка значений из .env

# BASE_DIR — корень проекта (папка с manage.py)
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Быстрая стартовая секция ────────────────────────────────────────────────

load_dotenv(BASE_DIR / ".env")

# Режим разработки: по умолчанию включён, в проде DJANGO_DEBUG=0
DEBUG = os.getenv("DJANGO_DEBUG", "1") == "1"

# Секретный ключ берём из KEY_DJ; без него в проде не стартуем
SECRET_KEY = os.getenv("KEY_DJ") or ("django-insecure-pager-dev-only" if DEBUG else "")
if not SECRET_KEY:
    raise ValueError("❌ SECRET_KEY не найден в .env! Установите KEY_DJ.")

ALLOWED_HOSTS: list[str] = [h for h in os.getenv("ALLOWED_HOSTS", "").split(",") if h]

# ── Приложения проекта ───────────────────────────────────────────────────────

INSTALLED_APPS = [
    "django.contrib.staticfiles",      # статика
    "rest_framework",                  # DRF — API фреймворк
    "pagewindow",                      # окно пагинации: сервисы, теги, API
]

# Тулбар включается явно (ENABLE_DEBUG_TOOLBAR=1) и только при DEBUG
ENABLE_DEBUG_TOOLBAR = os.getenv("ENABLE_DEBUG_TOOLBAR", "0") == "1"

if DEBUG and ENABLE_DEBUG_TOOLBAR:
    INSTALLED_APPS += ["debug_toolbar"]

# ── Middleware ───────────────────────────────────────────────────────────────

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

if DEBUG and ENABLE_DEBUG_TOOLBAR:
    # сразу после SecurityMiddleware (рекомендация тулбара)
    _dt_mw = "debug_toolbar.middleware.DebugToolbarMiddleware"
    sec_idx = MIDDLEWARE.index("django.middleware.security.SecurityMiddleware")
    MIDDLEWARE.insert(sec_idx + 1, _dt_mw)

# ── Урлы и WSGI ──────────────────────────────────────────────────────────────

ROOT_URLCONF = "pager.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",  # request нужен тегам пагинации
            ],
        },
    },
]

WSGI_APPLICATION = "pager.wsgi.application"

# ── База данных ──────────────────────────────────────────────────────────────
# Моделей нет: пагинация работает с уже посчитанными числами.
DATABASES: dict = {}

# ── Локализация и часовой пояс ──────────────────────────────────────────────

LANGUAGE_CODE = "ru-ru"
TIME_ZONE = "Europe/Moscow"
USE_I18N = True
USE_TZ = True

# ── Статика ─────────────────────────────────────────────────────────────────

STATIC_URL = "static/"


# ── Пагинация ───────────────────────────────────────────────────────────────

PAGE_WINDOW_MAX_VISIBLE = int(os.getenv("PAGE_WINDOW_MAX_VISIBLE", "7"))  # слотов в окне страниц
PAGE_WINDOW_PAGE_SIZE = int(os.getenv("PAGE_WINDOW_PAGE_SIZE", "20"))     # размер страницы в API

# ── DRF ─────────────────────────────────────────────────────────────────────
REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
        "rest_framework.renderers.BrowsableAPIRenderer",  # удобно при разработке
    ],
    # аутентификации нет: API только считает страницы
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "UNAUTHENTICATED_USER": None,
    "DEFAULT_PAGINATION_CLASS": "pagewindow.pagination.WindowedPagination",
    "PAGE_SIZE": PAGE_WINDOW_PAGE_SIZE,
}

# ── Логирование ─────────────────────────────────────────────────────────────

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "django": {"handlers": ["console"], "level": "INFO", "propagate": False},
        "pagewindow": {"level": LOG_LEVEL},
    },
    "root": {"handlers": ["console"], "level": "WARNING"},
}

# ── Django Debug Toolbar: INTERNAL_IPS ──────────────────────────────────────

if DEBUG and ENABLE_DEBUG_TOOLBAR:
    INTERNAL_IPS = ["127.0.0.1", "localhost", "::1"]

    # Docker/WSL: 172.17.0.X -> 172.17.0.1
    try:
        hostname, _, ips = socket.gethostbyname_ex(socket.gethostname())
        INTERNAL_IPS += [ip[:-1] + "1" for ip in ips if "." in ip]
    except OSError:
        pass  # без сети остаются локальные адреса

    INTERNAL_IPS = list(dict.fromkeys(INTERNAL_IPS))

    DEBUG_TOOLBAR_CONFIG = {
        "SHOW_COLLAPSED": True,
        "RESULTS_CACHE_SIZE": 50,
        "ROOT_TAG_EXTRA_ATTRS": 'style="z-index:9999"',
    }
