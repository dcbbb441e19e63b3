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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./multisite.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ADMIN_API_KEY = data.get("ADMIN_API_KEY", "test-admin-key-12345")
    # Page defaults used when a new site gets its homepage
    DEFAULT_PAGE_STATUS = data.get("DEFAULT_PAGE_STATUS", "draft")
    DEFAULT_PAGE_PARTS = data.get("DEFAULT_PAGE_PARTS", "body, extended")
    DEFAULT_PAGE_FILTER = data.get("DEFAULT_PAGE_FILTER")
    # Subdomain prefix of development addresses; "dev" when unset
    DEV_HOST = data.get("DEV_HOST")
    ROUTE_RELOAD_DELAY = float(data.get("ROUTE_RELOAD_DELAY", 0.5))
