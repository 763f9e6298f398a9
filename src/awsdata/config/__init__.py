"""Configuration package."""

from awsdata.config.loader import load_config
from awsdata.config.schemas import AppConfig, AWSProviderConfig, LoggingConfig

__all__: list[str] = ["AWSProviderConfig", "AppConfig", "LoggingConfig", "load_config"]
