"""Settings read from environment variables once, at import time.

``main.py`` calls ``load_dotenv()`` before anything imports this module, so
values placed in a ``.env`` file are visible here.
"""
import os


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Settings:
    SERVICE_NAME: str = "teamdesk-api"
    VERSION: str = "1.0.0"

    MONGODB_URI: str = os.getenv("MONGODB_URI", "mongodb://localhost:27017/HeliverseDB")
    # Used when MONGODB_URI carries no database path
    MONGODB_DB: str = os.getenv("MONGODB_DB", "HeliverseDB")
    MONGODB_TIMEOUT_MS: int = int(os.getenv("MONGODB_TIMEOUT_MS", "5000"))

    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "4001"))
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    DEFAULT_PAGE: int = int(os.getenv("DEFAULT_PAGE", "1"))
    DEFAULT_PAGE_LIMIT: int = int(os.getenv("DEFAULT_PAGE_LIMIT", "20"))
    MAX_PAGE_LIMIT: int = int(os.getenv("MAX_PAGE_LIMIT", "100"))

    USER_ID_START: int = int(os.getenv("USER_ID_START", "1"))
    ACTIVITY_LOG_ENABLED: bool = _env_bool("ACTIVITY_LOG_ENABLED", "true")

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


settings = Settings()
