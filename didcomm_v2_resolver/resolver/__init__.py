"""DID resolution: resolver contract, registry and configured setup."""

import logging

from ..config.injection_context import InjectionContext
from ..config.provider import ClassProvider
from .did_resolver import DIDResolver

LOGGER = logging.getLogger(__name__)


async def setup(context: InjectionContext):
    """Register the resolvers named by the `resolver.classes` setting."""
    registry = context.inject_or(DIDResolver)
    if not registry:
        LOGGER.warning("No DID Resolver instance found in context")
        return

    for class_path in context.settings.get_list("resolver.classes"):
        resolver = ClassProvider(class_path).provide(context.settings, context)
        await resolver.setup(context)
        registry.register_resolver(resolver)
        LOGGER.info("Registered DID resolver %s", class_path)

    if not registry.resolvers:
        LOGGER.warning("No DID resolvers registered; every DID will be unsupported")
