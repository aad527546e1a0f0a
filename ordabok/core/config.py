from pydantic_settings import BaseSettings
from functools import lru_cache
import os
from pathlib import Path
import logging

from dotenv import load_dotenv

_logger = logging.getLogger(__name__)

# Look for .env in the project directory (parent of the ordabok package)
project_dir = Path(__file__).parent.parent.parent
env_path = project_dir / ".env"

if env_path.exists():
    load_dotenv(env_path, override=False)
    _logger.info(f"Loaded .env file from: {env_path}")
else:
    # Fallback to current directory
    current_env = Path(".env")
    if current_env.exists():
        load_dotenv(current_env, override=False)
        _logger.info(f"Loaded .env file from: {current_env.absolute()}")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str = ""
    db_pool_size: int = 5
    db_max_overflow: int = 10
    db_pool_timeout: float = 30.0  # Seconds a checkout may block before failing

    # Administrative secret for the db_only_* operations and user listing
    admin_key: str = ""

    # Appwrite (external identity provider)
    appwrite_endpoint: str = ""
    appwrite_project: str = ""
    appwrite_api_key: str = ""
    appwrite_timeout: float = 10.0

    # API
    api_v1_prefix: str = "/api/v1"

    # CORS
    cors_origins: list[str] = ["*"]

    # Logging
    log_level: str = "INFO"
    environment: str = "production"

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"

    def __init__(self, **kwargs):
        # ORDABOK_HOSTS is a comma separated list of allowed origins, empty means all
        if "cors_origins" not in kwargs:
            hosts = os.getenv("ORDABOK_HOSTS", "")
            if hosts.strip():
                kwargs["cors_origins"] = [h.strip() for h in hosts.split(",") if h.strip()]
        super().__init__(**kwargs)

    @property
    def is_development(self) -> bool:
        return self.environment.lower() in ("development", "dev", "local")

    @property
    def sqlalchemy_url(self) -> str:
        """Database URL in the form SQLAlchemy expects (postgresql://, not postgres://)."""
        url = self.database_url
        if url.startswith("postgres://"):
            url = url.replace("postgres://", "postgresql://", 1)
        return url


@lru_cache
def get_settings() -> Settings:
    """Build and cache the settings, failing if no database is configured."""
    settings = Settings()
    if not settings.database_url:
        raise ValueError("DATABASE_URL environment variable is required")
    return settings
