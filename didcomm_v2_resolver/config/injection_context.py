"""Injection context: settings plus class bindings."""

from typing import Mapping, Optional, Type

from .base import BaseProvider, InjectorError, InjectType
from .provider import InstanceProvider
from .settings import Settings


class InjectionContext:
    """
    Holds the settings and the class bindings shared by DID resolvers.

    A class is bound either to a fixed instance or to a provider, and looked
    up again with `inject`. With `enforce_typing` on, a provided object must
    be an instance of the class it was requested as.
    """

    def __init__(
        self, *, settings: Mapping[str, object] = None, enforce_typing: bool = True
    ):
        """Initialize an `InjectionContext`."""
        self.enforce_typing = enforce_typing
        self._settings = Settings(settings)
        self._providers = {}

    @property
    def settings(self) -> Settings:
        """Accessor for the context settings."""
        return self._settings

    @settings.setter
    def settings(self, settings: Mapping[str, object]):
        """Replace the context settings."""
        self._settings = Settings(settings)

    def update_settings(self, settings: Mapping[str, object]):
        """Merge additional settings into the context."""
        if settings:
            self._settings.update(settings)

    def bind_instance(self, base_cls: Type[InjectType], instance: InjectType):
        """Bind `base_cls` to a fixed instance."""
        self._providers[base_cls] = InstanceProvider(instance)

    def bind_provider(self, base_cls: Type[InjectType], provider: BaseProvider):
        """Bind `base_cls` to a provider."""
        if not provider:
            raise ValueError("Cannot bind an empty provider")
        self._providers[base_cls] = provider

    def inject(
        self,
        base_cls: Type[InjectType],
        settings: Mapping[str, object] = None,
    ) -> InjectType:
        """
        Get the instance bound to `base_cls`.

        Raises:
            InjectorError: If nothing is bound, or the bound object has the
                wrong type while typing is enforced

        """
        result = self.inject_or(base_cls, settings)
        if result is None:
            raise InjectorError(f"No instance provided for class: {base_cls.__name__}")
        return result

    def inject_or(
        self,
        base_cls: Type[InjectType],
        settings: Mapping[str, object] = None,
        default: Optional[InjectType] = None,
    ) -> Optional[InjectType]:
        """Get the instance bound to `base_cls`, or `default` if there is none."""
        provider = self._providers.get(base_cls)
        if not provider:
            return default

        scoped = self._settings.extend(settings) if settings else self._settings
        result = provider.provide(scoped, self)
        if result is None:
            return default
        if self.enforce_typing and not isinstance(result, base_cls):
            raise InjectorError(
                f"Provided instance does not implement class: {base_cls.__name__}"
            )
        return result

    def copy(self) -> "InjectionContext":
        """Return a context with copies of the settings and bindings."""
        result = InjectionContext(
            settings=self._settings, enforce_typing=self.enforce_typing
        )
        result._providers = self._providers.copy()
        return result

    def __repr__(self) -> str:
        """Show the bound classes."""
        bound = ", ".join(cls.__name__ for cls in self._providers)
        return f"<{self.__class__.__name__}(bound=[{bound}])>"
