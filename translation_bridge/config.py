"""Application configuration."""
import os
from dataclasses import dataclass
from pathlib import Path

PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_MAPPINGS_DIR = str(PACKAGE_DIR / "mappings")
DEFAULT_REGISTRY_FILE = str(PACKAGE_DIR / "mappings" / "component-registry.json")


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class BridgeConfig:
    """Translation pipeline settings."""

    mappings_dir: str = DEFAULT_MAPPINGS_DIR
    registry_file: str = DEFAULT_REGISTRY_FILE
    confidence_threshold: float = 0.85
    low_confidence_threshold: float = 0.7
    cache_size: int = 100
    enable_cache: bool = True
    performance_mode: str = "balanced"  # "speed", "balanced", "quality"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "BridgeConfig":
        """Load config from environment variables."""
        return cls(
            mappings_dir=os.getenv("BRIDGE_MAPPINGS_DIR", DEFAULT_MAPPINGS_DIR),
            registry_file=os.getenv("BRIDGE_REGISTRY_FILE", DEFAULT_REGISTRY_FILE),
            confidence_threshold=float(os.getenv("BRIDGE_CONFIDENCE_THRESHOLD", "0.85")),
            cache_size=int(os.getenv("BRIDGE_CACHE_SIZE", "100")),
            enable_cache=_env_bool("BRIDGE_ENABLE_CACHE", True),
            performance_mode=os.getenv("BRIDGE_PERFORMANCE_MODE", "balanced"),
            log_level=os.getenv("BRIDGE_LOG_LEVEL", "INFO"),
        )


# Global instance
app_config = BridgeConfig.from_env()
