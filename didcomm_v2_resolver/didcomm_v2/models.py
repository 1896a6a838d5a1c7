"""DID Document shape consumed by the DIDComm v2 messaging runtime."""

from enum import Enum
from typing import Any, Mapping, Optional, Sequence

from marshmallow import EXCLUDE, fields, validate

from ..messaging.models.base import BaseModel, BaseModelSchema


class VerificationMaterialFormat(Enum):
    """Encodings of verification material understood by the runtime."""

    BASE58 = "Base58"
    MULTIBASE = "Multibase"
    HEX = "Hex"
    JWK = "JWK"
    OTHER = "Other"


class ServiceKind(Enum):
    """Service kind tags."""

    DIDCOMM_MESSAGING = "DIDCommMessaging"
    OTHER = "Other"


class VerificationMaterial(BaseModel):
    """Tagged verification material."""

    class Meta:
        """VerificationMaterial metadata."""

        schema_class = "VerificationMaterialSchema"

    def __init__(self, *, format: str, value: Any = None):
        """Initialize a VerificationMaterial instance."""
        self.format = format
        self.value = value


class VerificationMaterialSchema(BaseModelSchema):
    """VerificationMaterial schema."""

    class Meta:
        """VerificationMaterialSchema metadata."""

        model_class = VerificationMaterial
        unknown = EXCLUDE

    format = fields.Str(
        required=True,
        validate=validate.OneOf([f.value for f in VerificationMaterialFormat]),
        metadata={"example": VerificationMaterialFormat.BASE58.value},
    )
    value = fields.Raw(required=False, allow_none=True)


class DIDCommVerificationMethod(BaseModel):
    """Verification method with a single tagged material."""

    class Meta:
        """DIDCommVerificationMethod metadata."""

        schema_class = "DIDCommVerificationMethodSchema"

    def __init__(
        self,
        *,
        id: str,
        type: str,
        controller: Optional[str] = None,
        verification_material: VerificationMaterial,
    ):
        """Initialize a DIDCommVerificationMethod instance."""
        self.id = id
        self.type = type
        self.controller = controller
        self.verification_material = verification_material


class DIDCommVerificationMethodSchema(BaseModelSchema):
    """DIDCommVerificationMethod schema."""

    class Meta:
        """DIDCommVerificationMethodSchema metadata."""

        model_class = DIDCommVerificationMethod
        unknown = EXCLUDE

    id = fields.Str(required=True)
    type = fields.Str(required=True)
    controller = fields.Str(required=False)
    verification_material = fields.Nested(VerificationMaterialSchema, required=True)


class DIDCommService(BaseModel):
    """Service tagged with a single kind, e.g. `{"DIDCommMessaging": {...}}`."""

    class Meta:
        """DIDCommService metadata."""

        schema_class = "DIDCommServiceSchema"

    def __init__(self, *, id: str, kind: Mapping[str, Mapping[str, Any]]):
        """Initialize a DIDCommService instance."""
        self.id = id
        self.kind = dict(kind)

    @classmethod
    def messaging(
        cls,
        id: str,
        service_endpoint: Any,
        accept: Optional[Sequence[str]] = None,
        routing_keys: Optional[Sequence[str]] = None,
    ) -> "DIDCommService":
        """Create a DIDComm messaging service."""
        return cls(
            id=id,
            kind={
                ServiceKind.DIDCOMM_MESSAGING.value: {
                    "service_endpoint": service_endpoint,
                    "accept": list(accept) if accept else [],
                    "routing_keys": list(routing_keys) if routing_keys else [],
                }
            },
        )

    @classmethod
    def other(cls, id: str, attributes: Mapping[str, Any]) -> "DIDCommService":
        """Create a service the runtime treats opaquely."""
        return cls(id=id, kind={ServiceKind.OTHER.value: dict(attributes)})

    @property
    def kind_tag(self) -> ServiceKind:
        """Accessor for the kind tag."""
        (tag,) = self.kind
        return ServiceKind(tag)

    @property
    def kind_value(self) -> Mapping[str, Any]:
        """Accessor for the attributes under the kind tag."""
        (value,) = self.kind.values()
        return value


class DIDCommServiceSchema(BaseModelSchema):
    """DIDCommService schema."""

    class Meta:
        """DIDCommServiceSchema metadata."""

        model_class = DIDCommService
        unknown = EXCLUDE

    id = fields.Str(required=True)
    kind = fields.Dict(
        keys=fields.Str(validate=validate.OneOf([k.value for k in ServiceKind])),
        values=fields.Dict(),
        required=True,
        validate=validate.Length(equal=1),
    )


class DIDCommDIDDoc(BaseModel):
    """DID Document in the shape expected by the DIDComm v2 runtime."""

    class Meta:
        """DIDCommDIDDoc metadata."""

        schema_class = "DIDCommDIDDocSchema"

    def __init__(
        self,
        *,
        did: str,
        verification_methods: Optional[Sequence[DIDCommVerificationMethod]] = None,
        services: Optional[Sequence[DIDCommService]] = None,
        key_agreements: Optional[Sequence[str]] = None,
        authentications: Optional[Sequence[str]] = None,
    ):
        """Initialize a DIDCommDIDDoc instance."""
        self.did = did
        self.verification_methods = (
            list(verification_methods) if verification_methods else []
        )
        self.services = list(services) if services else []
        self.key_agreements = list(key_agreements) if key_agreements else []
        self.authentications = list(authentications) if authentications else []

    def verification_method(self, kid: str) -> Optional[DIDCommVerificationMethod]:
        """Look up a verification method by id."""
        return next(
            (vm for vm in self.verification_methods if vm.id == kid), None
        )


class DIDCommDIDDocSchema(BaseModelSchema):
    """DIDCommDIDDoc schema."""

    class Meta:
        """DIDCommDIDDocSchema metadata."""

        model_class = DIDCommDIDDoc
        unknown = EXCLUDE

    did = fields.Str(
        required=True,
        metadata={"description": "DID subject", "example": "did:example:123"},
    )
    verification_methods = fields.List(
        fields.Nested(DIDCommVerificationMethodSchema), required=True
    )
    services = fields.List(fields.Nested(DIDCommServiceSchema), required=True)
    key_agreements = fields.List(fields.Str(), required=True)
    authentications = fields.List(fields.Str(), required=True)
