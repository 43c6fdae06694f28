from __future__ import annotations
import logging
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

class Settings(BaseSettings):
    MONGODB_URI: str = ""
    MONGODB_NAME: str = ""
    ENVIRONMENT: str = ""

    # server locale (ENVIRONMENT=dev)
    DEV_HOST: str = "0.0.0.0"
    DEV_PORT: int = 8080

    LOG_LEVEL: str = "INFO"
    MONGO_SERVER_SELECTION_TIMEOUT_MS: int = 8000

    # se False il 500 non riporta il messaggio del driver al client
    EXPOSE_ERROR_DETAILS: bool = True

    model_config = SettingsConfigDict(env_file=None, extra="ignore")

_settings: Settings | None = None

def load_settings(dotenv_path: Path | None = None) -> Settings:
    """Legge .env (opzionale) + env e termina il processo se manca la config Mongo."""
    # .env nella working directory: se manca, valgono solo le variabili d'ambiente
    load_dotenv(dotenv_path or Path.cwd() / ".env", override=False)
    s = Settings()
    if not s.MONGODB_URI.strip() or not s.MONGODB_NAME.strip():
        logger.critical("Missing environment variables!")
        raise SystemExit(1)
    return s

def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings

def is_dev(s: Settings) -> bool:
    return s.ENVIRONMENT == "dev"
