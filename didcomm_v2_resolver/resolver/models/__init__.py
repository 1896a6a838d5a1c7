"""Source DID Document models produced by DID resolution."""

from .did_document import DIDDocument, DIDDocumentSchema
from .service import (
    DIDCommV1Service,
    DIDCommV2Service,
    IndyAgentService,
    Service,
    ServiceVariant,
    deserialize_service,
)
from .verification_method import VerificationMethod, VerificationMethodSchema

__all__ = [
    "DIDCommV1Service",
    "DIDCommV2Service",
    "DIDDocument",
    "DIDDocumentSchema",
    "IndyAgentService",
    "Service",
    "ServiceVariant",
    "VerificationMethod",
    "VerificationMethodSchema",
    "deserialize_service",
]
