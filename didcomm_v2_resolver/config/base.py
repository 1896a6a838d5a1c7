"""Configuration errors, the settings interface and provider base class."""

from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Optional, TypeVar

from ..core.error import BaseError

InjectType = TypeVar("InjectType")


class ConfigError(BaseError):
    """Base class for configuration errors."""


class SettingsError(ConfigError):
    """A setting is present but cannot be used as requested."""


class InjectorError(ConfigError):
    """No usable instance is bound for a requested class."""


class BaseSettings(Mapping[str, Any]):
    """Read access to resolver configuration keyed by dotted names."""

    @abstractmethod
    def get_value(self, *var_names: str, default: Any = None) -> Any:
        """
        Fetch the first of `var_names` which is defined.

        Args:
            var_names: Setting names, in order of preference
            default: Returned when none of the names is defined

        """

    def get_int(self, *var_names: str, default: Optional[int] = None):
        """Fetch a setting as an integer.

        Raises:
            SettingsError: If the value does not parse as an integer

        """
        value = self.get_value(*var_names, default=default)
        if value is None:
            return None
        try:
            return int(value)
        except (TypeError, ValueError) as err:
            raise SettingsError(
                f"Setting {var_names[0]} must be an integer, got {value!r}"
            ) from err

    def get_str(self, *var_names: str, default: Optional[str] = None):
        """Fetch a setting as a string."""
        value = self.get_value(*var_names, default=default)
        return None if value is None else str(value)

    def get_list(self, *var_names: str) -> List[str]:
        """Fetch a setting holding a list or a comma separated string."""
        value = self.get_value(*var_names)
        if not value:
            return []
        if isinstance(value, str):
            value = value.split(",")
        return [item.strip() for item in value if item and item.strip()]

    def __getitem__(self, name: str):
        """Fetch a setting, raising `KeyError` when it is undefined."""
        if not isinstance(name, str):
            raise TypeError(f"Setting name must be a string: {name!r}")
        missing = object()
        value = self.get_value(name, default=missing)
        if value is missing:
            raise KeyError(f"Undefined setting: {name}")
        return value

    @abstractmethod
    def copy(self) -> "BaseSettings":
        """Return an independent copy."""

    @abstractmethod
    def extend(self, other: Mapping[str, Any]) -> "BaseSettings":
        """Return a copy with `other` merged on top."""

    def __repr__(self) -> str:
        """Show the settings and their values."""
        pairs = ", ".join(f"{name}={self[name]}" for name in self)
        return f"<{self.__class__.__name__}({pairs})>"


class BaseProvider(ABC):
    """Produces the instance bound to a class in an injection context."""

    @abstractmethod
    def provide(self, settings: BaseSettings, context):
        """Return the instance, using `context` to satisfy its own dependencies."""
