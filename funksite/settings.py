"""
Django settings for funksite.

Only what the static site build needs: templates, static files, logging and
the code highlighting options. There is no database.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "funksite-insecure-build-key")

DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() in ("1", "true", "yes")

ALLOWED_HOSTS = []

INSTALLED_APPS = [
    "django.contrib.staticfiles",
    "blog",
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [],
        },
    },
]

DATABASES = {}

USE_TZ = True
TIME_ZONE = "UTC"

STATIC_URL = "/assets/"

# Site build
SITE_TITLE = os.environ.get("SITE_TITLE", "Funk")
SITE_CONTENT_DIR = Path(os.environ.get("SITE_CONTENT_DIR", BASE_DIR / "_posts"))
SITE_BUILD_DIR = Path(os.environ.get("SITE_BUILD_DIR", BASE_DIR / "_site"))

# Code highlighting
# Fences declared with a key are highlighted with the grammar named by its value
HIGHLIGHT_LANGUAGE_ALIASES = {
    "funk": "haskell",
}
# Restyle language-funk code blocks after highlighting
FUNK_REDECORATE = True

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "{levelname} {name}: {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "blog": {
            "handlers": ["console"],
            "level": os.environ.get("BLOG_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
    },
}
