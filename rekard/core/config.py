from pydantic_settings import BaseSettings
from dotenv import load_dotenv
from pathlib import Path
import logging

_logger = logging.getLogger(__name__)

# Load .env explicitly before creating Settings
# Look for .env in the project directory (parent of the rekard package)
project_dir = Path(__file__).parent.parent.parent
env_path = project_dir / ".env"

if env_path.exists():
    load_dotenv(env_path, override=True)
    _logger.info(f"Loaded .env file from: {env_path}")
else:
    # Fallback to current directory
    current_env = Path(".env")
    if current_env.exists():
        load_dotenv(current_env, override=True)
        _logger.info(f"Loaded .env file from: {current_env.absolute()}")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database holding the persisted deck collection
    database_url: str = "sqlite:///./rekard.db"

    # Key of the persisted deck collection document
    storage_key: str = "rekard.decks.v3"

    # API
    api_v1_prefix: str = "/api/v1"

    # CORS
    cors_origins: list[str] = ["*"]

    # Open study sessions kept in memory
    max_open_sessions: int = 100
    session_idle_timeout_seconds: int = 3600

    # Logging
    log_level: str = "INFO"

    # "development" exposes tracebacks in 500 responses
    environment: str = "production"

    class Config:
        env_file = ".env"
        case_sensitive = False

    @property
    def is_development(self) -> bool:
        return self.environment.lower() in ("development", "dev", "local")


# Create settings instance
settings = Settings()
