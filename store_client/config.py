# store_client/config.py
import os
from pydantic_settings import BaseSettings
from dotenv import load_dotenv
import logging

# Load variables from .env file located in the project root directory
dotenv_path = os.path.join(os.path.dirname(os.path.dirname(__file__)), '.env')
if os.path.exists(dotenv_path):
    load_dotenv(dotenv_path=dotenv_path)
else:
    load_dotenv() # Fallback

class Settings(BaseSettings):
    """Loads store client settings from environment variables and .env file."""

    # --- Store Service ---
    STORE_URL: str = "http://localhost:8000" # scheme://host[:port], no path

    # --- Transport ---
    STORE_TIMEOUT: float | None = 60.0 # seconds, None disables the transport timeout

    class Config:
        env_file = '.env'
        env_file_encoding = 'utf-8'
        extra = 'ignore'

# Instantiate settings once for import
settings = Settings()

# --- Logging Setup ---
log_level_str = os.getenv("LOG_LEVEL", "INFO").upper(); log_level = getattr(logging, log_level_str, logging.INFO)
logging.basicConfig(level=log_level, format='%(asctime)s - %(name)s - [%(levelname)s] - %(message)s', datefmt='%Y-%m-%d %H:%M:%S')
logger = logging.getLogger("StoreClient_Core")
logging.getLogger("httpx").setLevel(logging.WARNING); logging.getLogger("httpcore").setLevel(logging.WARNING)

# --- Configuration Validation Checks ---
logger.info(f"Store client settings loaded. Log Level: {log_level_str}")
if not settings.STORE_URL: logger.warning("STORE_URL missing. Clients must be given an explicit endpoint.")
else: logger.info(f"Using store endpoint: {settings.STORE_URL}")
if settings.STORE_TIMEOUT is None: logger.info("Store transport timeout disabled.")
elif settings.STORE_TIMEOUT <= 0: logger.warning(f"Invalid STORE_TIMEOUT: {settings.STORE_TIMEOUT}. Requests will time out immediately.")
