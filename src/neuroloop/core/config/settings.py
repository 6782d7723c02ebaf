"""Application settings loaded from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """NeuroLoop scoring server configuration."""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Server
    # Default to loopback; opt into `0.0.0.0` explicitly for remote access.
    neuroloop_host: str = "127.0.0.1"
    neuroloop_port: int = 8010
    neuroloop_log_level: str = "info"
    # "streamable-http" for network clients, "stdio" for a locally spawned server
    neuroloop_transport: str = "streamable-http"
    # There is no auth layer: binding to a non-loopback host requires this flag.
    neuroloop_allow_insecure_bind: bool = False

    # Scoring defaults supplied by the calling layer
    default_metric_value: float = 50.0
    default_training_plan: str = "expert"

    # Training plan catalogue (empty = packaged YAML files)
    plan_catalog_dir: str = ""


def get_settings() -> Settings:
    """Create and return a Settings instance."""
    return Settings()
