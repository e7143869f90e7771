import os
from dotenv import load_dotenv

load_dotenv()

def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

def _log_level(value) -> str:
    level = (value or "INFO").strip().upper()
    return level if level in LOG_LEVELS else "INFO"

class Settings:
    """Application settings and configuration."""
    # Firebase service account key as a JSON string
    FIREBASE_SERVICE_ACCOUNT_KEY_JSON = os.getenv("FIREBASE_SERVICE_ACCOUNT_KEY_JSON")
    FIREBASE_DATABASE_URL = os.getenv("FIREBASE_DATABASE_URL")

    # Number of saved checklists allowed on the free plan
    FREE_PLAN_CHECKLIST_LIMIT = int(os.getenv("FREE_PLAN_CHECKLIST_LIMIT", "5"))

    # Append destination-specific items (e.g. Paris, Gramado) after the category items
    ENABLE_DESTINATION_OVERRIDES = _env_flag("ENABLE_DESTINATION_OVERRIDES", True)

    # Unknown levels fall back to INFO
    LOG_LEVEL = _log_level(os.getenv("LOG_LEVEL"))

    CORS_ORIGINS = [
        origin.strip()
        for origin in os.getenv(
            "CORS_ORIGINS",
            "http://localhost,http://localhost:8080,http://127.0.0.1:8080,http://localhost:8000,http://127.0.0.1:8000",
        ).split(",")
        if origin.strip()
    ]

settings = Settings()
