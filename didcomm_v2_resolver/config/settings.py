"""In-memory settings."""

from typing import Any, Iterator, Mapping

from .base import BaseSettings


class Settings(BaseSettings):
    """Mutable mapping of setting names to values."""

    def __init__(self, values: Mapping[str, Any] = None):
        """Initialize the settings from an optional mapping."""
        self._values = dict(values) if values else {}

    def get_value(self, *var_names: str, default: Any = None) -> Any:
        """Fetch the first of `var_names` which is defined."""
        for name in var_names:
            if name in self._values:
                return self._values[name]
        return default

    def set_value(self, var_name: str, value: Any):
        """Define a setting."""
        if not isinstance(var_name, str):
            raise TypeError(f"Setting name must be a string: {var_name!r}")
        if not var_name:
            raise ValueError("Setting name must not be empty")
        self._values[var_name] = value

    def clear_value(self, var_name: str):
        """Remove a setting if present."""
        self._values.pop(var_name, None)

    def update(self, other: Mapping[str, Any]):
        """Merge `other` into these settings."""
        for name, value in other.items():
            self.set_value(name, value)

    def copy(self) -> "Settings":
        """Return an independent copy."""
        return Settings(self._values)

    def extend(self, other: Mapping[str, Any]) -> "Settings":
        """Return a copy with `other` merged on top."""
        result = self.copy()
        result.update(other)
        return result

    __setitem__ = set_value
    __delitem__ = clear_value

    def __contains__(self, name) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __bool__(self) -> bool:
        # empty settings are still a valid configuration
        return True
