"""
Application settings and configuration
"""

import os
from pathlib import Path
from dotenv import load_dotenv
from typing import Optional

# Load environment variables from .env file
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


class Settings:
    """Application settings loaded from environment variables"""

    # Storage
    STORE_BACKEND: str = os.getenv("STORE_BACKEND", "memory").lower()
    STORE_FILE_PATH: Optional[str] = os.getenv("STORE_FILE_PATH", "./data/tasks.json")

    # Time
    USER_TIMEZONE_OFFSET: int = int(os.getenv("USER_TIMEZONE_OFFSET", "0"))

    # Application
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE: str = os.getenv("LOG_FILE", "")
    WEB_HOST: str = os.getenv("WEB_HOST", "0.0.0.0")
    WEB_PORT: int = int(os.getenv("WEB_PORT", "8000"))

    @classmethod
    def validate(cls) -> bool:
        """Validate that storage settings are consistent"""
        if cls.STORE_BACKEND not in ("memory", "json"):
            raise ValueError(
                f"Unknown STORE_BACKEND '{cls.STORE_BACKEND}', expected 'memory' or 'json'"
            )

        if cls.STORE_BACKEND == "json" and not cls.STORE_FILE_PATH:
            raise ValueError("STORE_FILE_PATH is required when STORE_BACKEND is 'json'")

        return True


# Global settings instance
settings = Settings()
