"""Configuration settings for the project estimator."""

# Load .env into os.environ before the settings are read
from dotenv import load_dotenv
load_dotenv()

from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Any, Dict, Optional
from pathlib import Path
import json


class Settings(BaseSettings):
    """Global settings for the estimator.

    Settings can be overridden via environment variables with ESTIMATOR_ prefix.
    Example: ESTIMATOR_PRICING_CONFIG_PATH=/etc/estimator/pricing.json
    """

    # Pricing configuration
    pricing_config_path: str = Field(
        default="./data/pricing.json",
        description="JSON file holding the pricing configuration"
    )

    # Bundle defaults (used when the configuration has no bundles section)
    max_bundle_quantity: int = Field(
        default=50,
        ge=0,
        description="Maximum bundles per request when bundles.max_quantity is not configured"
    )
    default_days_per_bundle: float = Field(
        default=0.5,
        ge=0.0,
        description="Days added per bundle when bundles.days_per_bundle is not configured"
    )

    # Presentation
    currency_symbol: str = Field(
        default="£",
        description="Currency symbol used by the CLI"
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Root log level for the CLI (DEBUG, INFO, WARNING, ERROR)"
    )

    model_config = {
        "env_prefix": "ESTIMATOR_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def get_pricing_config_path(self) -> Path:
        """Get pricing configuration path as Path object."""
        return Path(self.pricing_config_path)


def load_pricing_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Read a pricing configuration from a JSON file.

    Args:
        path: File to read; defaults to settings.pricing_config_path

    Returns:
        The configuration mapping (not yet validated)
    """
    from pricing.errors import ConfigurationError

    config_path = Path(path) if path else settings.get_pricing_config_path()
    if not config_path.is_file():
        raise FileNotFoundError(f"Pricing configuration not found: {config_path}")

    data = json.loads(config_path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Pricing configuration must be a JSON object, got {type(data).__name__}",
            key=str(config_path),
        )
    return data


# Create singleton instance
settings = Settings()
