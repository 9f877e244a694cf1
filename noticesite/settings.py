"""Django settings for the notices site."""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "insecure-notices-dev-key")
DEBUG = os.getenv("DJANGO_DEBUG", "1") == "1"
ALLOWED_HOSTS = os.getenv("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")

INSTALLED_APPS = [
    "notices.apps.NoticesConfig",
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            # Notice tags are available in every template without {% load %}
            "builtins": ["notices.templatetags.notice_tags"],
        },
    },
]

DATABASES = {}

USE_TZ = True

# --------------------------------------------------------------------------------------
# Notices
# --------------------------------------------------------------------------------------

NOTICES_PANDOC_FORMAT = os.getenv(
    "NOTICES_PANDOC_FORMAT",
    "markdown+markdown_attribute+raw_html+pipe_tables+footnotes+smart",
)
NOTICES_PANDOC_EXTRA_ARGS = []
NOTICES_SANITIZE = True

LOG_LEVEL = os.getenv("DJANGO_LOG_LEVEL", "INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "[{levelname}] {name}: {message}", "style": "{"},
        "verbose": {"format": "{asctime} [{levelname}] {name} {module}:{lineno} {message}", "style": "{"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "verbose"},
    },
    "root": {"handlers": ["console"], "level": LOG_LEVEL},
    "loggers": {
        "notices": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
    },
}
