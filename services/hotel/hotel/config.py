import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent
env_path = BASE_DIR / ".env"

load_dotenv(dotenv_path=env_path)


def _database_url_from_parts() -> str:
    db_host = os.getenv("DB_HOST", "localhost")
    db_port = os.getenv("DB_PORT", "5432")
    db_user = os.getenv("DB_USER", "postgres")
    db_pass = os.getenv("DB_PASS", "postgres")
    db_name = os.getenv("DB_NAME", "hotel")
    # psycopg 3 handles both sync and async engines
    return f"postgresql+psycopg://{db_user}:{db_pass}@{db_host}:{db_port}/{db_name}"


class Settings:
    """Runtime configuration read from the environment (and .env)."""

    def __init__(self):
        self.database_url = os.getenv("DATABASE_URL") or _database_url_from_parts()
        self.db_echo = os.getenv("DB_ECHO", "false").lower() in ("1", "true", "yes")
        self.db_pool_size = int(os.getenv("DB_POOL_SIZE", "20"))
        self.default_currency = os.getenv("DEFAULT_CURRENCY", "INR")
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.cors_origins = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
            if origin.strip()
        ]


settings = Settings()
