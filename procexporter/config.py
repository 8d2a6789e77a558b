"""Configuration management for procexporter"""

from typing import Optional

from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Listener and runtime settings. The target process is only ever given on the command line."""
    host: str = "0.0.0.0"
    port: int = 8081
    log_level: str = "INFO"
    runtime_metrics: bool = True  # exporter's own platform/gc series

    class Config:
        env_file = ".env"
        env_prefix = "PROCEXPORTER_"
        case_sensitive = False


_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the global config instance"""
    global _config
    if _config is None:
        _config = Config()
    return _config
