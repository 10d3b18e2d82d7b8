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
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))

    # Tarif lifecycle policy
    LATENCY_PERIOD_DAYS = data.get("LATENCY_PERIOD_DAYS", 10)  # Dormancy before re-anchoring to today
    FORBIDDEN_DAYS = data.get("FORBIDDEN_DAYS", [29, 30, 31])  # Never used as a period anchor
    TARIF_GROUP_IDS = data.get("TARIF_GROUP_IDS", [1])  # Groups offered in the tarif catalog
    DAYS_PER_MONTH = data.get("DAYS_PER_MONTH", 30)  # Month length used for proration

    # Credit access (deferred payment)
    CREDIT_ACCESS_DAYS = data.get("CREDIT_ACCESS_DAYS", 3)
