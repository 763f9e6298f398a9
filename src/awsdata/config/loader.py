"""Configuration loading.

Settings come from, in increasing priority: schema defaults, an optional
settings file, ``AWSDATA_`` environment variables and explicit overrides.
Nested keys are addressed with a double underscore, for example
``AWSDATA_AWS__REGION=eu-west-1``.
"""

from typing import Any, Optional

from dynaconf import Dynaconf
from pydantic import ValidationError

from awsdata.config.schemas import AppConfig
from awsdata.domain.base.exceptions import ConfigurationError
from awsdata.infrastructure.logging.logger import get_logger

ENVVAR_PREFIX = "AWSDATA"

logger = get_logger(__name__)


def _normalize_keys(data: Any) -> Any:
    if isinstance(data, dict):
        return {str(key).lower(): _normalize_keys(value) for key, value in data.items()}
    return data


def _drop_none(data: dict[str, Any]) -> dict[str, Any]:
    """Remove None leaves, and sections left empty by that, from an override mapping."""
    result = {}
    for key, value in data.items():
        if isinstance(value, dict):
            value = _drop_none(value)
            if not value:
                continue
        elif value is None:
            continue
        result[key] = value
    return result


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _format_errors(errors: list[dict[str, Any]]) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in errors
    )


def load_config(
    settings_file: Optional[str] = None,
    overrides: Optional[dict[str, Any]] = None,
) -> AppConfig:
    """
    Load and validate the application configuration.

    Args:
        settings_file: Optional TOML/JSON/YAML settings file
        overrides: Values that win over every other source, e.g. CLI flags

    Returns:
        Validated AppConfig

    Raises:
        ConfigurationError: If the merged settings fail validation
    """
    settings = Dynaconf(
        envvar_prefix=ENVVAR_PREFIX,
        settings_files=[settings_file] if settings_file else [],
        environments=False,
        load_dotenv=False,
    )

    raw = _normalize_keys(settings.as_dict())
    raw = {key: value for key, value in raw.items() if key in AppConfig.model_fields}
    if overrides:
        raw = _deep_merge(raw, _drop_none(_normalize_keys(overrides)))

    logger.debug("Loaded configuration sections: %s", sorted(raw))

    try:
        return AppConfig.model_validate(raw)
    except ValidationError as e:
        errors = e.errors(include_url=False)
        raise ConfigurationError(
            f"Invalid configuration: {_format_errors(errors)}",
            details={"errors": errors},
        ) from e
