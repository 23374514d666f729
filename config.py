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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./test.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    CREATE_TABLES_ON_STARTUP = bool(data.get("CREATE_TABLES_ON_STARTUP", True))

    # Page cache for rendered dashboard views
    CACHE_BACKEND = data.get("CACHE_BACKEND", "memory")  # "memory" or "redis"
    REDIS_URL = data.get("REDIS_URL", "redis://localhost:6379/0")
    PAGE_CACHE_TTL_SECONDS = data.get("PAGE_CACHE_TTL_SECONDS", 300)

    # Navigation targets
    INVOICES_PATH = data.get("INVOICES_PATH", "/dashboard/invoices")
    LOGIN_REDIRECT_PATH = data.get("LOGIN_REDIRECT_PATH", "/dashboard")
