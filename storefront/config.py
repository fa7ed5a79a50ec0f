# storefront/config.py

import os
from dataclasses import dataclass


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Storefront API")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Load the bundled products/customers/reviews at start.  Disable to
    # boot with three empty collections.
    seed_data: bool = _flag("SEED_DATA", "true")


settings = Settings()
