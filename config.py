import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./invoicing.db")
    API_PREFIX = data.get("API_PREFIX", "")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    API_RELOAD = bool(data.get("API_RELOAD", 0))
    API_WORKERS = int(data.get("API_WORKERS", 1))
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    AUTO_CREATE_TABLES = bool(data.get("AUTO_CREATE_TABLES", 1))
    ENABLE_SENTRY = data.get("ENABLE_SENTRY", 0)
    DSN_SENTRY = data.get("DSN_SENTRY", "")
    SENTRY_ENVIRONMENT = data.get("SENTRY_ENVIRONMENT", "dev")

    # Identity provider (GoTrue / Supabase Auth)
    IDENTITY_PROVIDER_URL = data.get("IDENTITY_PROVIDER_URL", "http://localhost:9999")
    IDENTITY_PROVIDER_API_KEY = data.get("IDENTITY_PROVIDER_API_KEY", "")
    IDENTITY_PROVIDER_TIMEOUT = data.get("IDENTITY_PROVIDER_TIMEOUT", 10.0)

    # Principal cache: "memory" or "redis"
    CACHE_BACKEND = data.get("CACHE_BACKEND", "memory")
    REDIS_URL = data.get("REDIS_URL", "redis://localhost:6379/0")
    PRINCIPAL_CACHE_TTL_SECONDS = data.get("PRINCIPAL_CACHE_TTL_SECONDS", 3600)

    # Invoicing
    IDENTIFIER_MAX_ATTEMPTS = data.get("IDENTIFIER_MAX_ATTEMPTS", 10)
    SEARCH_RESULT_LIMIT = data.get("SEARCH_RESULT_LIMIT", 10)
    DEFAULT_DUE_DAYS = data.get("DEFAULT_DUE_DAYS", 30)
    DEFAULT_TERMS = data.get("DEFAULT_TERMS", "Default terms and conditions")
    DEFAULT_INVOICE_PREFIX = data.get("DEFAULT_INVOICE_PREFIX", "INV")
