"""Configuration management for the clover class dashboard client."""

from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional
import os
from dotenv import load_dotenv

# Load .env file
load_dotenv()


def _optional_float(name: str) -> Optional[float]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return float(raw)


@dataclass
class ApiConfig:
    """Remote dashboard API configuration."""
    base_url: str = "http://127.0.0.1:8001"
    timeout: float = 30.0

    @classmethod
    def from_env(cls) -> "ApiConfig":
        return cls(
            base_url=os.getenv("CLOVER_API_URL", "http://127.0.0.1:8001"),
            timeout=float(os.getenv("CLOVER_API_TIMEOUT", "30")),
        )


@dataclass
class DialogConfig:
    """Confirmation dialog behaviour."""
    # Seconds to wait for a confirmed action; None waits indefinitely
    confirm_timeout: Optional[float] = None


@dataclass
class PathConfig:
    """Path configuration."""
    base: Path = field(default_factory=lambda: Path.home() / ".clover")

    @property
    def journal(self) -> Path:
        return self.base / "journal"

    @property
    def history_file(self) -> Path:
        return self.base / ".clover_history"


@dataclass
class Config:
    """Main configuration class."""
    api: ApiConfig = field(default_factory=ApiConfig)
    dialog: DialogConfig = field(default_factory=DialogConfig)
    paths: PathConfig = field(default_factory=PathConfig)
    user_id: Optional[str] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        data_dir = os.getenv("CLOVER_DATA_DIR")
        return cls(
            api=ApiConfig.from_env(),
            dialog=DialogConfig(
                confirm_timeout=_optional_float("CLOVER_CONFIRM_TIMEOUT"),
            ),
            paths=PathConfig(base=Path(data_dir)) if data_dir else PathConfig(),
            user_id=os.getenv("CLOVER_USER_ID") or None,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


# Global config instance
config = Config.from_env()
