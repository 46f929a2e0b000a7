import os

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()


class Settings(BaseModel):
    database_url: str = "sqlite:///./shop.db"
    log_level: str = "INFO"
    sql_echo: bool = False


def get_settings() -> Settings:
    """Build settings from environment variables (and .env file)"""
    return Settings(
        database_url=os.getenv("DATABASE_URL", "sqlite:///./shop.db"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        sql_echo=os.getenv("SQL_ECHO", "false").lower() in ("1", "true", "yes"),
    )
