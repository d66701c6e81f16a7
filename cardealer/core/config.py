import os
from dotenv import load_dotenv
from pathlib import Path

# Project root is two levels above this file (cardealer/core/config.py).
BASE_DIR = Path(__file__).resolve().parent.parent.parent
ENV_PATH = BASE_DIR / ".env"

load_dotenv(dotenv_path=ENV_PATH)

class Settings:
    """
    A class to hold all application settings.
    It reads settings from environment variables and .env file.
    """
    # --- Project Settings ---
    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "Car Dealer API")
    API_PREFIX: str = os.getenv("API_PREFIX", "/api/v1")

    # --- Database Settings ---
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./cardealer.db")
    SQL_ECHO: bool = os.getenv("SQL_ECHO", "false").lower() == "true"

    # --- Logging Settings ---
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

settings = Settings()

if not settings.DATABASE_URL:
    raise ValueError("DATABASE_URL environment variable is not set.")
