"""Execution context handed to DID resolvers."""

from typing import Mapping, Optional, Type

from ..config.base import BaseSettings, InjectType
from ..config.injection_context import InjectionContext


class Profile:
    """
    Named scope over an injection context.

    The profile is passed through to every resolver call untouched; resolvers
    use it to look up settings or services bound for them.
    """

    DEFAULT_NAME: str = "default"
    TEST_PROFILE_NAME: str = "test-profile"

    def __init__(self, *, context: InjectionContext = None, name: str = None):
        """Initialize a profile, with an empty context unless one is given."""
        self._context = context or InjectionContext()
        self._name = name or self.DEFAULT_NAME

    @property
    def context(self) -> InjectionContext:
        """Accessor for the injection context."""
        return self._context

    @property
    def name(self) -> str:
        """Accessor for the profile name."""
        return self._name

    @property
    def settings(self) -> BaseSettings:
        """Accessor for the context settings."""
        return self._context.settings

    def inject(
        self, base_cls: Type[InjectType], settings: Mapping[str, object] = None
    ) -> InjectType:
        """Get the instance bound to `base_cls` in the context."""
        return self._context.inject(base_cls, settings)

    def inject_or(
        self,
        base_cls: Type[InjectType],
        settings: Mapping[str, object] = None,
        default: Optional[InjectType] = None,
    ) -> Optional[InjectType]:
        """Get the instance bound to `base_cls`, or `default`."""
        return self._context.inject_or(base_cls, settings, default)

    @classmethod
    def test_profile(cls, settings: Mapping[str, object] = None) -> "Profile":
        """Create a profile for tests, with type checks on injection disabled."""
        return cls(
            context=InjectionContext(settings=settings, enforce_typing=False),
            name=cls.TEST_PROFILE_NAME,
        )

    def __repr__(self) -> str:
        """Show the profile name."""
        return f"<{type(self).__name__}(name={self.name})>"
