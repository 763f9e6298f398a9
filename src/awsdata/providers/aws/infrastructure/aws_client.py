"""AWS client wrapper with lazily created service clients."""

from typing import Any, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError

from awsdata.config.schemas import AWSProviderConfig
from awsdata.domain.base.ports import LoggingPort
from awsdata.infrastructure.adapters.logging_adapter import LoggingAdapter
from awsdata.providers.aws.exceptions.aws_exceptions import AWSConfigurationError


class AWSClient:
    """Wrapper for the AWS service clients used by the data sources."""

    def __init__(
        self,
        config: Optional[AWSProviderConfig] = None,
        logger: Optional[LoggingPort] = None,
        session: Optional[boto3.Session] = None,
    ) -> None:
        """
        Initialize the AWS client wrapper.

        Args:
            config: AWS provider configuration, defaults are used when omitted
            logger: Logger for logging messages
            session: Pre-built boto3 session, mainly for tests

        Raises:
            AWSConfigurationError: If the boto3 session cannot be created
        """
        self.config = config or AWSProviderConfig()
        self._logger = logger or LoggingAdapter(__name__)
        self.region_name = self.config.region
        self.profile_name = self.config.profile

        # Transport level retries and timeouts live here, never in callers
        self.boto_config = Config(
            region_name=self.region_name,
            retries={
                "max_attempts": self.config.max_retries,
                "mode": self.config.retry_mode,
            },
            connect_timeout=self.config.connect_timeout,
            read_timeout=self.config.read_timeout,
        )

        try:
            self.session = session or boto3.Session(
                region_name=self.region_name, profile_name=self.profile_name
            )
        except BotoCoreError as e:
            raise AWSConfigurationError(
                f"AWS client initialization failed: {e}",
                error_code=type(e).__name__,
            ) from e

        self._clients: dict[str, Any] = {}

        self._logger.debug(
            "AWS client initialized with region: %s, profile: %s, retries: %d (%s), timeouts: connect=%ds, read=%ds",
            self.region_name,
            self.profile_name or "default",
            self.config.max_retries,
            self.config.retry_mode,
            self.config.connect_timeout,
            self.config.read_timeout,
        )

    def client(self, service_name: str) -> Any:
        """
        Return a cached boto3 client for service_name, creating it on first use.

        Raises:
            AWSConfigurationError: If botocore cannot build the client
        """
        if service_name not in self._clients:
            self._logger.debug("Initializing %s client on first use", service_name)
            kwargs: dict[str, Any] = {"config": self.boto_config}
            if self.config.endpoint_url:
                kwargs["endpoint_url"] = self.config.endpoint_url
            try:
                self._clients[service_name] = self.session.client(service_name, **kwargs)
            except BotoCoreError as e:
                raise AWSConfigurationError(
                    f"Could not create {service_name} client: {e}",
                    error_code=type(e).__name__,
                ) from e
        return self._clients[service_name]

    @property
    def rds_client(self):
        """Lazy initialization of RDS client."""
        return self.client("rds")

    @property
    def lex_models_client(self):
        """Lazy initialization of Lex Model Building Service client."""
        return self.client("lex-models")
