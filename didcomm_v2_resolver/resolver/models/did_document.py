"""DID Document as returned by DID resolution."""

from typing import Any, Optional, Sequence, Union

from marshmallow import EXCLUDE, ValidationError, fields
from pydid import DID, DIDError

from ...messaging.models.base import BaseModel, BaseModelSchema
from .service import Service, ServiceField
from .verification_method import (
    VerificationMethod,
    VerificationMethodSchema,
    VerificationRelationshipField,
)

VerificationRelationship = Sequence[Union[str, VerificationMethod]]


def validate_did(value: str):
    """Validate a DID string with pydid."""
    try:
        DID.validate(value)
    except DIDError as err:
        raise ValidationError(f"Invalid DID: {value}") from err


class DIDDocument(BaseModel):
    """Resolved DID Document."""

    class Meta:
        """DIDDocument metadata."""

        schema_class = "DIDDocumentSchema"

    def __init__(
        self,
        *,
        id: str,
        context: Any = None,
        also_known_as: Optional[Sequence[str]] = None,
        controller: Union[str, Sequence[str], None] = None,
        verification_method: Optional[Sequence[VerificationMethod]] = None,
        service: Optional[Sequence[Service]] = None,
        authentication: Optional[VerificationRelationship] = None,
        assertion_method: Optional[VerificationRelationship] = None,
        key_agreement: Optional[VerificationRelationship] = None,
        capability_invocation: Optional[VerificationRelationship] = None,
        capability_delegation: Optional[VerificationRelationship] = None,
    ):
        """Initialize a DIDDocument instance."""
        self.id = id
        self.context = context
        self.also_known_as = list(also_known_as) if also_known_as else []
        self.controller = controller
        self.verification_method = (
            list(verification_method) if verification_method else []
        )
        self.service = list(service) if service else []
        self.authentication = list(authentication) if authentication else []
        self.assertion_method = list(assertion_method) if assertion_method else []
        self.key_agreement = list(key_agreement) if key_agreement else []
        self.capability_invocation = (
            list(capability_invocation) if capability_invocation else []
        )
        self.capability_delegation = (
            list(capability_delegation) if capability_delegation else []
        )


class DIDDocumentSchema(BaseModelSchema):
    """DIDDocument schema."""

    class Meta:
        """DIDDocumentSchema metadata."""

        model_class = DIDDocument
        unknown = EXCLUDE

    id = fields.Str(
        required=True,
        validate=validate_did,
        metadata={"description": "DID subject", "example": "did:example:123"},
    )
    context = fields.Raw(required=False, allow_none=True, data_key="@context")
    also_known_as = fields.List(
        fields.Str(), required=False, allow_none=True, data_key="alsoKnownAs"
    )
    controller = fields.Raw(required=False, allow_none=True)
    verification_method = fields.List(
        fields.Nested(VerificationMethodSchema),
        required=False,
        allow_none=True,
        data_key="verificationMethod",
    )
    service = fields.List(ServiceField(), required=False, allow_none=True)
    authentication = fields.List(
        VerificationRelationshipField(), required=False, allow_none=True
    )
    assertion_method = fields.List(
        VerificationRelationshipField(),
        required=False,
        allow_none=True,
        data_key="assertionMethod",
    )
    key_agreement = fields.List(
        VerificationRelationshipField(),
        required=False,
        allow_none=True,
        data_key="keyAgreement",
    )
    capability_invocation = fields.List(
        VerificationRelationshipField(),
        required=False,
        allow_none=True,
        data_key="capabilityInvocation",
    )
    capability_delegation = fields.List(
        VerificationRelationshipField(),
        required=False,
        allow_none=True,
        data_key="capabilityDelegation",
    )
