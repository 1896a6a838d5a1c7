"""Registry of DID resolvers.

Dispatches each DID to the registered resolvers that support it, native
resolvers first, and deserializes the resulting DID Document.
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import List, Optional, Sequence, Text, Tuple, Union

from pydid import DID

from ..core.profile import Profile
from ..messaging.models.base import BaseModelError
from .base import (
    BaseDIDResolver,
    DIDMethodNotSupported,
    DIDNotFound,
    ResolutionMetadata,
    ResolutionResult,
    ResolverError,
)
from .models import DIDDocument

LOGGER = logging.getLogger(__name__)

NOT_FOUND_ERROR = "notFound"
RETRIEVED_TIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


class DIDResolver:
    """Resolves DIDs through the registered `BaseDIDResolver` instances."""

    DEFAULT_TIMEOUT = 30

    def __init__(
        self,
        resolvers: Optional[List[BaseDIDResolver]] = None,
        *,
        timeout: Optional[int] = None,
    ):
        """
        Initialize the registry.

        Args:
            resolvers: Resolvers to register, in order
            timeout: Seconds each resolver gets to answer, `DEFAULT_TIMEOUT`
                if not given

        """
        self.resolvers = list(resolvers) if resolvers else []
        self.timeout = self.DEFAULT_TIMEOUT if timeout is None else timeout

    def register_resolver(self, resolver: BaseDIDResolver):
        """Register a resolver after those already registered."""
        self.resolvers.append(resolver)

    async def _supporting_resolvers(
        self, profile: Profile, did: str
    ) -> List[BaseDIDResolver]:
        supporting = [
            resolver
            for resolver in self.resolvers
            if await resolver.supports(profile, did)
        ]
        if not supporting:
            raise DIDMethodNotSupported(f'No resolver supporting DID "{did}" loaded')
        # stable sort: registration order is kept within each group
        return sorted(supporting, key=lambda resolver: not resolver.native)

    async def _resolve(
        self,
        profile: Profile,
        did: Union[str, DID],
        service_accept: Optional[Sequence[Text]] = None,
        *,
        timeout: Optional[int] = None,
    ) -> Tuple[BaseDIDResolver, dict]:
        if isinstance(did, DID):
            did = str(did)
        else:
            DID.validate(did)
        timeout = self.timeout if timeout is None else timeout

        for resolver in await self._supporting_resolvers(profile, did):
            LOGGER.debug("Resolving DID %s with %s", did, resolver)
            try:
                document = await asyncio.wait_for(
                    resolver.resolve(profile, did, service_accept), timeout
                )
            except DIDNotFound:
                LOGGER.debug("DID %s not found by resolver %s", did, resolver)
                continue
            return resolver, document

        raise DIDNotFound(f"DID {did} could not be resolved")

    async def resolve(
        self,
        profile: Profile,
        did: Union[str, DID],
        service_accept: Optional[Sequence[Text]] = None,
        *,
        timeout: Optional[int] = None,
    ) -> dict:
        """
        Resolve a DID to its raw DID Document.

        Raises:
            pydid.DIDError: If `did` is not a valid DID
            DIDMethodNotSupported: If no registered resolver supports the DID
            DIDNotFound: If every supporting resolver reports it not found

        """
        _, document = await self._resolve(
            profile, did, service_accept, timeout=timeout
        )
        return document

    async def resolve_with_metadata(
        self, profile: Profile, did: Union[str, DID], *, timeout: Optional[int] = None
    ) -> ResolutionResult:
        """
        Resolve a DID to a `DIDDocument` together with resolution metadata.

        A DID that no supporting resolver finds yields a result without a
        document, with metadata error `notFound`.

        Raises:
            pydid.DIDError: If `did` is not a valid DID
            DIDMethodNotSupported: If no registered resolver supports the DID
            ResolverError: If the resolved document is not a valid DID Document

        """
        started = datetime.now(tz=timezone.utc)
        try:
            resolver, document = await self._resolve(profile, did, timeout=timeout)
        except DIDNotFound:
            resolver, document = None, None
        finished = datetime.now(tz=timezone.utc)

        duration = int((finished - started).total_seconds() * 1000)
        retrieved_time = finished.strftime(RETRIEVED_TIME_FORMAT)

        if document is None:
            LOGGER.debug("No DID Document found for %s", did)
            return ResolutionResult(
                None,
                ResolutionMetadata(
                    None, None, retrieved_time, duration, error=NOT_FOUND_ERROR
                ),
            )

        resolver_name = type(resolver).__qualname__
        try:
            did_document = DIDDocument.deserialize(document)
        except BaseModelError as err:
            raise ResolverError(
                f"{resolver_name} returned an invalid DID Document for {did}"
            ) from err

        return ResolutionResult(
            did_document,
            ResolutionMetadata(resolver.type, resolver_name, retrieved_time, duration),
        )
