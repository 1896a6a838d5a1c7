"""Adapter from DID resolution to the DIDComm v2 runtime resolver interface."""

import logging
from typing import Optional

from ..core.profile import Profile
from ..resolver.did_resolver import DIDResolver
from ..resolver.models import DIDDocument
from .mappers import map_service, map_verification_method
from .models import DIDCommDIDDoc

LOGGER = logging.getLogger(__name__)


def adapt_did_document(doc: DIDDocument) -> DIDCommDIDDoc:
    """
    Build the DIDComm v2 form of a resolved DID Document.

    Embedded key agreement and authentication entries are appended to the
    verification methods after the document's own, in the order encountered,
    so that every referenced id has a matching verification method.
    """
    did_doc = DIDCommDIDDoc(
        did=doc.id,
        verification_methods=[
            map_verification_method(vm) for vm in doc.verification_method
        ],
        services=[map_service(service) for service in doc.service],
    )

    for relationship, refs in (
        (doc.key_agreement, did_doc.key_agreements),
        (doc.authentication, did_doc.authentications),
    ):
        for entry in relationship:
            if isinstance(entry, str):
                refs.append(entry)
            else:
                refs.append(entry.id)
                did_doc.verification_methods.append(map_verification_method(entry))

    return did_doc


class ResolverAdapter:
    """Adapter for the DID resolver to the DIDComm v2 runtime resolver."""

    def __init__(self, profile: Profile, resolver: DIDResolver):
        """Init the adapter."""
        self.profile = profile
        self.resolver = resolver

    @classmethod
    def from_profile(cls, profile: Profile) -> "ResolverAdapter":
        """Create an adapter using the resolver bound to the profile."""
        return cls(profile, profile.inject(DIDResolver))

    async def resolve_and_adapt(self, did: str) -> Optional[DIDCommDIDDoc]:
        """
        Resolve a DID and adapt its document for the DIDComm v2 runtime.

        Returns:
            The adapted document, or None if the DID has no document

        """
        result = await self.resolver.resolve_with_metadata(self.profile, did)
        if result.did_document is None:
            LOGGER.debug("No DID Document for %s: %s", did, result.metadata.error)
            return None

        return adapt_did_document(result.did_document)

    async def resolve(self, did: str) -> Optional[DIDCommDIDDoc]:
        """Resolve a DID; entry point used by the messaging runtime."""
        return await self.resolve_and_adapt(did)

    async def is_resolvable(self, did: str) -> bool:
        """Check to see if a DID is resolvable."""
        for resolver in self.resolver.resolvers:
            if await resolver.supports(self.profile, did):
                return True

        return False
