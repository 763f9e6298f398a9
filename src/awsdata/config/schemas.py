"""Configuration schemas."""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class AWSProviderConfig(BaseModel):
    """AWS connection configuration."""

    model_config = ConfigDict(extra="ignore")

    region: str = Field("us-east-1", description="AWS region used for every client")
    profile: Optional[str] = Field(None, description="Named profile from the shared credentials file")
    endpoint_url: Optional[str] = Field(
        None, description="Override endpoint, e.g. for a local AWS emulator"
    )
    max_retries: int = Field(3, ge=0, le=10, description="Maximum botocore retry attempts")
    retry_mode: Literal["legacy", "standard", "adaptive"] = Field(
        "standard", description="Botocore retry mode"
    )
    connect_timeout: int = Field(5, gt=0, description="Connection timeout in seconds")
    read_timeout: int = Field(10, gt=0, description="Read timeout in seconds")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="ignore")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", description="Package log level"
    )
    json_format: bool = Field(False, description="Render log records as JSON lines")


class AppConfig(BaseModel):
    """Top level configuration."""

    model_config = ConfigDict(extra="ignore")

    aws: AWSProviderConfig = Field(default_factory=AWSProviderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
