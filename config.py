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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./admin_console.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    AUTO_CREATE_TABLES = bool(data.get("AUTO_CREATE_TABLES", True))
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_EXPIRE_MINUTES = int(data.get("JWT_EXPIRE_MINUTES", 60))
    IDENTITY_API_KEY = data.get("IDENTITY_API_KEY", "")
    IDENTITY_BASE_URL = data.get(
        "IDENTITY_BASE_URL", "https://identitytoolkit.googleapis.com/v1"
    )
    FUNCTIONS_BASE_URL = data.get("FUNCTIONS_BASE_URL", "")
    IDENTITY_TIMEOUT_SECONDS = float(data.get("IDENTITY_TIMEOUT_SECONDS", 10))
