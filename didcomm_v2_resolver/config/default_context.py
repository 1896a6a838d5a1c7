"""Build the injection context a resolver adapter runs in."""

import logging
from typing import Mapping

from .. import resolver
from ..resolver.did_resolver import DIDResolver
from .injection_context import InjectionContext
from .settings import Settings

LOGGER = logging.getLogger(__name__)


class DefaultContextBuilder:
    """Builds an injection context with a configured `DIDResolver` bound."""

    def __init__(self, settings: Mapping[str, object] = None):
        """
        Initialize the builder.

        Args:
            settings: Configuration such as `resolver.classes` and
                `resolver.timeout`

        """
        self.settings = Settings(settings)

    def update_settings(self, settings: Mapping[str, object]):
        """Layer additional settings over the current ones."""
        if settings:
            self.settings = self.settings.extend(settings)

    async def build_context(self) -> InjectionContext:
        """Bind the DID resolver registry and register the configured resolvers."""
        context = InjectionContext(settings=self.settings)

        timeout = context.settings.get_int(
            "resolver.timeout", default=DIDResolver.DEFAULT_TIMEOUT
        )
        context.bind_instance(DIDResolver, DIDResolver(timeout=timeout))
        LOGGER.debug("Bound DID resolver registry with %ss timeout", timeout)

        await resolver.setup(context)
        return context
