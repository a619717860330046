"""Application settings for the UserTask API."""
from dataclasses import dataclass
from datetime import timedelta
from functools import lru_cache
import os

from dotenv import load_dotenv

# Load environment variables from a local .env file if present
load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Immutable configuration built once at process start."""

    database_url: str = "sqlite:///./usertask.db"
    jwt_key: str = "SecretKey"
    jwt_issuer: str = "UserTaskAPI"
    jwt_audience: str = "UserTaskAPI"
    token_lifetime: timedelta = timedelta(hours=1)
    bcrypt_rounds: int = 12
    display_timezone: str = "Asia/Kolkata"
    environment: str = "development"
    frontend_url: str = "http://localhost:3000"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables, falling back to defaults."""
        issuer = os.environ.get("JWT_ISSUER", cls.jwt_issuer)
        return cls(
            database_url=os.environ.get("DATABASE_URL", cls.database_url),
            jwt_key=os.environ.get("JWT_KEY", cls.jwt_key),
            jwt_issuer=issuer,
            jwt_audience=os.environ.get("JWT_AUDIENCE", issuer),
            token_lifetime=timedelta(
                minutes=int(os.environ.get("TOKEN_LIFETIME_MINUTES", "60"))
            ),
            bcrypt_rounds=int(os.environ.get("BCRYPT_ROUNDS", str(cls.bcrypt_rounds))),
            display_timezone=os.environ.get("DISPLAY_TIMEZONE", cls.display_timezone),
            environment=os.environ.get("ENVIRONMENT", cls.environment),
            frontend_url=os.environ.get("FRONTEND_URL", cls.frontend_url),
            log_level=os.environ.get("LOG_LEVEL", cls.log_level),
        )


@lru_cache
def get_settings() -> Settings:
    """Dependency returning the process-wide settings."""
    return Settings.from_env()
