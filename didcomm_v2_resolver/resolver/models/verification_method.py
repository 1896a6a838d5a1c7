"""Verification method as found in a resolved DID Document."""

from typing import Any, Mapping, Optional

from marshmallow import EXCLUDE, fields

from ...messaging.models.base import BaseModel, BaseModelSchema


class VerificationMethod(BaseModel):
    """A single key record with its encoding-specific material."""

    class Meta:
        """VerificationMethod metadata."""

        schema_class = "VerificationMethodSchema"

    def __init__(
        self,
        *,
        id: str,
        type: str,
        controller: Optional[str] = None,
        public_key_base58: Optional[str] = None,
        public_key_multibase: Optional[str] = None,
        public_key_hex: Optional[str] = None,
        public_key_jwk: Optional[Mapping[str, Any]] = None,
        public_key_pem: Optional[str] = None,
        public_key_base64: Optional[str] = None,
        blockchain_account_id: Optional[str] = None,
        ethereum_address: Optional[str] = None,
    ):
        """Initialize a VerificationMethod instance."""
        self.id = id
        self.type = type
        self.controller = controller
        self.public_key_base58 = public_key_base58
        self.public_key_multibase = public_key_multibase
        self.public_key_hex = public_key_hex
        self.public_key_jwk = public_key_jwk
        self.public_key_pem = public_key_pem
        self.public_key_base64 = public_key_base64
        self.blockchain_account_id = blockchain_account_id
        self.ethereum_address = ethereum_address


class VerificationMethodSchema(BaseModelSchema):
    """VerificationMethod schema."""

    class Meta:
        """VerificationMethodSchema metadata."""

        model_class = VerificationMethod
        unknown = EXCLUDE

    id = fields.Str(
        required=True,
        metadata={
            "description": "Verification method identifier",
            "example": "did:example:123#key-1",
        },
    )
    type = fields.Str(
        required=True,
        metadata={
            "description": "Verification method type",
            "example": "X25519KeyAgreementKey2019",
        },
    )
    controller = fields.Str(
        required=False,
        metadata={"description": "Controller DID", "example": "did:example:123"},
    )
    public_key_base58 = fields.Str(required=False, data_key="publicKeyBase58")
    public_key_multibase = fields.Str(required=False, data_key="publicKeyMultibase")
    public_key_hex = fields.Str(required=False, data_key="publicKeyHex")
    public_key_jwk = fields.Dict(required=False, data_key="publicKeyJwk")
    public_key_pem = fields.Str(required=False, data_key="publicKeyPem")
    public_key_base64 = fields.Str(required=False, data_key="publicKeyBase64")
    blockchain_account_id = fields.Str(required=False, data_key="blockchainAccountId")
    ethereum_address = fields.Str(required=False, data_key="ethereumAddress")


class VerificationRelationshipField(fields.Field):
    """
    Entry of a verification relationship such as `keyAgreement`.

    Either a reference to a verification method by id, or an embedded
    verification method.
    """

    default_error_messages = {
        "invalid": "Expected a reference string or an embedded verification method."
    }

    def _serialize(self, value, attr, obj, **kwargs):
        if value is None or isinstance(value, str):
            return value
        return value.serialize()

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, str):
            return value
        if isinstance(value, Mapping):
            return VerificationMethodSchema(unknown=EXCLUDE).load(value)
        raise self.make_error("invalid")
