"""
Django settings for the tzprefs project.

For more information on this file, see
https://docs.djangoproject.com/en/stable/topics/settings/
"""

import os
from pathlib import Path

import environ

BASE_DIR = Path(__file__).resolve().parent.parent.parent

env = environ.Env()
env.read_env(os.path.join(BASE_DIR, ".env"))

SECRET_KEY = env("SECRET_KEY", default="django-insecure-5bXz1cQd0GvA9n7LrTf2kWmYh3uJpE8s")

DEBUG = env.bool("DEBUG", default=True)

# Environment name: "local", "production", or any custom value (e.g. "staging").
ENVIRONMENT = env("ENVIRONMENT", default="local")

# Wildcard is fine in dev; restrict to actual hostnames in production
ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", default=["*"])


# --- Apps ---

DJANGO_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
]

PROJECT_APPS = [
    "apps.users.apps.UserConfig",
    "apps.timezones.apps.TimezonesConfig",
]

INSTALLED_APPS = DJANGO_APPS + PROJECT_APPS

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    # needs the session and the authenticated user
    "apps.timezones.middleware.TimeZoneMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "config.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.template.context_processors.tz",
                "django.contrib.messages.context_processors.messages",
                "apps.timezones.context_processors.time_zone",
            ],
        },
    },
]

WSGI_APPLICATION = "config.wsgi.application"
ASGI_APPLICATION = "config.asgi.application"


# --- Database ---

DATABASES = {
    "default": env.db("DATABASE_URL", default=f"sqlite:///{BASE_DIR / 'db.sqlite3'}"),
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"


# --- Auth ---

AUTH_USER_MODEL = "users.User"
LOGIN_URL = "admin:login"
LOGIN_REDIRECT_URL = "users:user_profile"

AUTH_PASSWORD_VALIDATORS = [
    {"NAME": "django.contrib.auth.password_validation.UserAttributeSimilarityValidator"},
    {"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator"},
    {"NAME": "django.contrib.auth.password_validation.CommonPasswordValidator"},
    {"NAME": "django.contrib.auth.password_validation.NumericPasswordValidator"},
]


# --- Internationalization ---

LANGUAGE_CODE = "en-us"
# Server-side storage time zone. Requests render in the zone resolved by TimeZoneMiddleware.
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True


# --- Static files ---

STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR / "static_root"


# --- Time zone resolution ---

TIMEZONE_PARAMETER_NAME = env("TIMEZONE_PARAMETER_NAME", default="timezone")
TIMEZONE_SESSION_KEY = env("TIMEZONE_SESSION_KEY", default="timezone")
TIMEZONE_COOKIE_NAME = env("TIMEZONE_COOKIE_NAME", default="timezone")
TIMEZONE_DEFAULT = env("TIMEZONE_DEFAULT", default="GMT")
TIMEZONE_COOKIE_AGE = env.int("TIMEZONE_COOKIE_AGE", default=60 * 60 * 24 * 365)  # 1 year
TIMEZONE_COOKIE_PATH = env("TIMEZONE_COOKIE_PATH", default="/")
TIMEZONE_COOKIE_DOMAIN = env("TIMEZONE_COOKIE_DOMAIN", default=None)
TIMEZONE_COOKIE_SECURE = env.bool("TIMEZONE_COOKIE_SECURE", default=False)
TIMEZONE_COOKIE_HTTPONLY = env.bool("TIMEZONE_COOKIE_HTTPONLY", default=False)
TIMEZONE_COOKIE_SAMESITE = env("TIMEZONE_COOKIE_SAMESITE", default="Lax")


# --- Sentry ---

# Set SENTRY_DSN in the environment to enable error reporting.
SENTRY_DSN = env("SENTRY_DSN", default="")

if SENTRY_DSN:
    import sentry_sdk
    from sentry_sdk.integrations.django import DjangoIntegration

    sentry_sdk.init(dsn=SENTRY_DSN, environment=ENVIRONMENT, integrations=[DjangoIntegration()])

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": '[{asctime}] {levelname} "{name}" {message}',
            "style": "{",
            "datefmt": "%d/%b/%Y %H:%M:%S",  # match Django server time format
        },
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "verbose"},
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": env("DJANGO_LOG_LEVEL", default="INFO"),
        },
        "apps": {
            "handlers": ["console"],
            "level": env("APPS_LOG_LEVEL", default="INFO"),
        },
    },
}
