"""RDS orderable DB instance option models."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OrderableDBInstanceCriteria(BaseModel):
    """
    Search criteria for orderable DB instance options.

    Only ``engine`` is required. ``None`` means "not supplied": such criteria
    are left out of the request instead of being defaulted. ``storage_type``
    and ``preferred_db_instance_classes`` are never sent to AWS; they are
    applied to the retrieved options.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    engine: str = Field(min_length=1)
    engine_version: Optional[str] = None
    db_instance_class: Optional[str] = None
    license_model: Optional[str] = None
    availability_zone_group: Optional[str] = None
    vpc: Optional[bool] = None
    storage_type: Optional[str] = None
    preferred_db_instance_classes: tuple[str, ...] = ()

    def to_request_params(self) -> dict[str, Any]:
        """Build DescribeOrderableDBInstanceOptions parameters from supplied criteria."""
        params: dict[str, Any] = {"Engine": self.engine}
        optional = {
            "AvailabilityZoneGroup": self.availability_zone_group,
            "DBInstanceClass": self.db_instance_class,
            "EngineVersion": self.engine_version,
            "LicenseModel": self.license_model,
            "Vpc": self.vpc,
        }
        params.update({key: value for key, value in optional.items() if value is not None})
        return params

    def describe(self) -> dict[str, Any]:
        """Supplied criteria only, for error messages and logs."""
        data = self.model_dump(exclude_none=True)
        if not data.get("preferred_db_instance_classes"):
            data.pop("preferred_db_instance_classes", None)
        else:
            data["preferred_db_instance_classes"] = list(data["preferred_db_instance_classes"])
        return data


class OrderableDBInstanceOption(BaseModel):
    """One orderable engine/version/class/storage combination returned by RDS."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    availability_zone_group: Optional[str] = Field(None, alias="AvailabilityZoneGroup")
    availability_zones: tuple[str, ...] = Field((), alias="AvailabilityZones")
    db_instance_class: Optional[str] = Field(None, alias="DBInstanceClass")
    engine: Optional[str] = Field(None, alias="Engine")
    engine_version: Optional[str] = Field(None, alias="EngineVersion")
    license_model: Optional[str] = Field(None, alias="LicenseModel")
    max_iops_per_db_instance: Optional[int] = Field(None, alias="MaxIopsPerDbInstance")
    max_iops_per_gib: Optional[float] = Field(None, alias="MaxIopsPerGib")
    max_storage_size: Optional[int] = Field(None, alias="MaxStorageSize")
    min_iops_per_db_instance: Optional[int] = Field(None, alias="MinIopsPerDbInstance")
    min_iops_per_gib: Optional[float] = Field(None, alias="MinIopsPerGib")
    min_storage_size: Optional[int] = Field(None, alias="MinStorageSize")
    multi_az_capable: Optional[bool] = Field(None, alias="MultiAZCapable")
    outpost_capable: Optional[bool] = Field(None, alias="OutpostCapable")
    read_replica_capable: Optional[bool] = Field(None, alias="ReadReplicaCapable")
    storage_type: Optional[str] = Field(None, alias="StorageType")
    supported_engine_modes: tuple[str, ...] = Field((), alias="SupportedEngineModes")
    supports_enhanced_monitoring: Optional[bool] = Field(None, alias="SupportsEnhancedMonitoring")
    supports_global_databases: Optional[bool] = Field(None, alias="SupportsGlobalDatabases")
    supports_iam_database_authentication: Optional[bool] = Field(
        None, alias="SupportsIAMDatabaseAuthentication"
    )
    supports_iops: Optional[bool] = Field(None, alias="SupportsIops")
    supports_kerberos_authentication: Optional[bool] = Field(
        None, alias="SupportsKerberosAuthentication"
    )
    supports_performance_insights: Optional[bool] = Field(
        None, alias="SupportsPerformanceInsights"
    )
    supports_storage_autoscaling: Optional[bool] = Field(None, alias="SupportsStorageAutoscaling")
    supports_storage_encryption: Optional[bool] = Field(None, alias="SupportsStorageEncryption")
    vpc: Optional[bool] = Field(None, alias="Vpc")

    @field_validator("availability_zones", mode="before")
    @classmethod
    def _zone_names(cls, value: Any) -> Any:
        """RDS returns zones as [{"Name": "us-east-1a"}, ...]; keep the names."""
        if value is None:
            return ()
        names = [zone.get("Name") if isinstance(zone, dict) else zone for zone in value]
        return [name for name in names if name is not None]

    @field_validator("supported_engine_modes", mode="before")
    @classmethod
    def _engine_modes(cls, value: Any) -> Any:
        return () if value is None else value

    @classmethod
    def from_describe_orderable_db_instance_options(
        cls, option_data: dict[str, Any]
    ) -> "OrderableDBInstanceOption":
        """Create an option from one OrderableDBInstanceOptions entry."""
        return cls.model_validate(option_data)

    def to_attributes(self) -> dict[str, Any]:
        """Flat attribute mapping keyed by data source attribute name."""
        return {
            key: list(value) if isinstance(value, tuple) else value
            for key, value in self.model_dump().items()
        }

    def __str__(self) -> str:
        return (
            f"OrderableDBInstanceOption(class={self.db_instance_class}, engine={self.engine} "
            f"{self.engine_version}, storage={self.storage_type})"
        )
