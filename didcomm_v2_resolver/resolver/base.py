"""Contract for DID resolvers and the results of resolution."""

import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import NamedTuple, Optional, Pattern, Sequence, Text, Union

from pydid import DID

from ..config.injection_context import InjectionContext
from ..core.error import BaseError
from ..core.profile import Profile
from .models import DIDDocument


class ResolverError(BaseError):
    """Base class for resolver exceptions."""


class DIDNotFound(ResolverError):
    """The DID does not exist in the registry the resolver consults."""


class DIDMethodNotSupported(ResolverError):
    """No resolver is registered for the method of the DID."""


class ResolverType(Enum):
    """Whether a resolver resolves DIDs itself or delegates elsewhere."""

    NATIVE = "native"
    NON_NATIVE = "non-native"


class ResolutionMetadata(NamedTuple):
    """How a DID was resolved, or why it was not."""

    resolver_type: Optional[ResolverType]
    resolver: Optional[str]
    retrieved_time: str
    duration: int
    error: Optional[str] = None

    def serialize(self) -> dict:
        """Return the metadata as a JSON-compatible dict."""
        serialized = self._asdict()
        if self.resolver_type:
            serialized["resolver_type"] = self.resolver_type.value
        return serialized


class ResolutionResult:
    """A resolved DID Document, or None, with its resolution metadata."""

    def __init__(
        self, did_document: Optional[DIDDocument], metadata: ResolutionMetadata
    ):
        """Initialize the result."""
        self.did_document = did_document
        self.metadata = metadata

    def serialize(self) -> dict:
        """Return the result as a JSON-compatible dict."""
        return {
            "did_document": self.did_document.serialize()
            if self.did_document
            else None,
            "metadata": self.metadata.serialize(),
        }


class BaseDIDResolver(ABC):
    """
    Resolver for the DIDs of one or more DID methods.

    Subclasses implement `setup` and `_resolve`, and either define
    `supported_did_regex` or override `supports`.
    """

    def __init__(self, type_: Optional[ResolverType] = None):
        """Initialize the resolver as native or non-native (the default)."""
        self.type = type_ or ResolverType.NON_NATIVE

    @abstractmethod
    async def setup(self, context: InjectionContext):
        """Prepare the resolver once, before it is registered."""

    @property
    def native(self) -> bool:
        """Accessor for whether this resolver is native."""
        return self.type is ResolverType.NATIVE

    @property
    def supported_did_regex(self) -> Pattern:
        """Pattern of the DIDs this resolver supports."""
        raise NotImplementedError(
            f"{type(self).__name__} must define supported_did_regex "
            "or override supports"
        )

    async def supports(self, profile: Profile, did: str) -> bool:
        """Check whether this resolver supports `did`."""
        return bool(re.match(self.supported_did_regex, did))

    async def resolve(
        self,
        profile: Profile,
        did: Union[str, DID],
        service_accept: Optional[Sequence[Text]] = None,
    ) -> dict:
        """
        Resolve `did` to the raw DID Document dict.

        Raises:
            pydid.DIDError: If `did` is not a valid DID
            DIDMethodNotSupported: If this resolver does not support `did`
            DIDNotFound: If the DID does not exist

        """
        if isinstance(did, DID):
            did = str(did)
        else:
            DID.validate(did)
        if not await self.supports(profile, did):
            raise DIDMethodNotSupported(
                f"{type(self).__name__} does not support DID method for: {did}"
            )

        return await self._resolve(profile, did, service_accept)

    @abstractmethod
    async def _resolve(
        self,
        profile: Profile,
        did: str,
        service_accept: Optional[Sequence[Text]] = None,
    ) -> dict:
        """Fetch the DID Document of a validated, supported DID."""
