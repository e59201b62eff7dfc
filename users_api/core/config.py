# Standard library imports
import os
from pathlib import Path
from typing import Final, Optional


# Project root (the directory holding the users_api package)
PROJECT_ROOT: Final[Path] = Path(__file__).resolve().parent.parent.parent


class Settings:
    """
    Application settings loaded from environment variables.
    
    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """
    
    def __init__(self) -> None:
        # Database Configuration
        self.database_path: Final[str] = os.getenv("USERS_DB_PATH", "users.db")
        self.database_timeout_seconds: Final[float] = float(
            os.getenv("USERS_DB_TIMEOUT_SECONDS", "5.0")
        )
        self.seed_user_full_name: Final[str] = os.getenv("SEED_USER_FULL_NAME", "Peter Parker")
        
        # Logging Configuration
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")
    
    def resolved_database_path(self) -> str:
        """
        Resolve the SQLite database path.
        
        Absolute paths are returned unchanged; relative paths resolve
        against the project root.
        """
        if os.path.isabs(self.database_path):
            return self.database_path
        return str((PROJECT_ROOT / self.database_path).resolve())


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)
    
    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
