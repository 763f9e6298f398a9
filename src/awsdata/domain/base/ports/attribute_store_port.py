"""Attribute store port.

The host orchestration framework owns the resource data object that a data
source reads its configuration from and writes its results into. Data
sources only ever see it through this port.
"""

from abc import ABC, abstractmethod
from typing import Any


class AttributeStorePort(ABC):
    """Port interface for a framework-managed key/value attribute store."""

    @property
    @abstractmethod
    def id(self) -> str:
        """Stable identifier of the resolved object ("" while unset)."""

    @abstractmethod
    def set_id(self, value: str) -> None:
        """Set the stable identifier."""

    @abstractmethod
    def get(self, key: str) -> Any:
        """Return the value for key, or the zero value of its type when unset."""

    @abstractmethod
    def get_ok(self, key: str) -> tuple[Any, bool]:
        """Return (value, ok) where ok is False for unset or zero values."""

    @abstractmethod
    def has_config(self, key: str) -> bool:
        """Whether the caller supplied key, even with a zero value."""

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Write a value by attribute name; None writes the type's zero value."""
