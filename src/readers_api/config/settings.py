"""
Configuration settings for the Readers API
"""

import os
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ENV_FILES = {
    "default": ".env",
    "test": ".env.test",
}

# Environment configuration
ENV = os.getenv("ENV", "development")
PORT = int(os.getenv("PORT", 8080))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# CORS settings
ALLOWED_ORIGINS = [origin.strip() for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",") if origin.strip()]


def load_env_file(target: str = "default", override: bool = True, env_file: Optional[str] = None) -> Path:
    """
    Load the .env file for a target environment into os.environ

    Relative names resolve against the current working directory.

    Args:
        target: "default" for .env, "test" for .env.test
        override: Replace variables that are already set
        env_file: Explicit path to load instead of the target's file

    Returns:
        Path of the env file that was looked up
    """
    if target not in ENV_FILES:
        raise ValueError(f"Unknown environment target: {target}. Available: {list(ENV_FILES)}")

    env_path = Path(env_file) if env_file else Path.cwd() / ENV_FILES[target]
    if load_dotenv(env_path, override=override):
        logger.info(f"Loaded environment from {env_path}")
    else:
        logger.warning(f"No environment file found at {env_path} - using process environment")
    return env_path


@dataclass
class DatabaseConfig:
    """Connection parameters for the PostgreSQL database"""
    host: str = "localhost"
    port: int = 5432
    user: str = None
    password: str = field(default=None, repr=False)
    database: str = None

    @classmethod
    def from_env(cls) -> "DatabaseConfig":
        """Build the configuration from DB_* environment variables"""
        return cls(
            host=os.getenv("DB_HOST", "localhost"),
            port=int(os.getenv("DB_PORT", 5432)),
            user=os.getenv("DB_USER"),
            password=os.getenv("DB_PASSWORD"),
            database=os.getenv("DB_NAME"),
        )

    def connect_kwargs(self, database: str = None) -> Dict[str, Any]:
        """Keyword arguments for asyncpg.connect / asyncpg.create_pool"""
        return {
            "host": self.host,
            "port": self.port,
            "user": self.user,
            "password": self.password,
            "database": database or self.database,
        }

    def as_env(self) -> Dict[str, Any]:
        """Environment variable view, used in diagnostics"""
        return {
            "DB_HOST": self.host,
            "DB_PORT": self.port,
            "DB_USER": self.user,
            "DB_PASSWORD": self.password,
            "DB_NAME": self.database,
        }
