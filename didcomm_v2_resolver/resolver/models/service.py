"""Services of a resolved DID Document, tagged by variant."""

from enum import Enum
from typing import Any, Mapping, Optional, Sequence, Union

from marshmallow import EXCLUDE, fields

from ...messaging.models.base import BaseModel, BaseModelSchema

DIDCOMM_V2_SERVICE_TYPES = ("DIDCommMessaging", "DIDComm")
DIDCOMM_V1_SERVICE_TYPE = "did-communication"
INDY_AGENT_SERVICE_TYPE = "IndyAgent"


class ServiceVariant(Enum):
    """Closed set of service variants recognized by DIDComm consumers."""

    DIDCOMM_V2 = "didcomm-v2"
    DIDCOMM_V1 = "didcomm-v1"
    INDY_AGENT = "indy-agent"
    GENERIC = "generic"


class Service(BaseModel):
    """Generic service endpoint descriptor."""

    variant = ServiceVariant.GENERIC

    class Meta:
        """Service metadata."""

        schema_class = "ServiceSchema"

    def __init__(
        self,
        *,
        id: str,
        type: str,
        service_endpoint: Union[str, Mapping[str, Any], None] = None,
    ):
        """Initialize a Service instance."""
        self.id = id
        self.type = type
        self.service_endpoint = service_endpoint


class ServiceSchema(BaseModelSchema):
    """Service schema."""

    class Meta:
        """ServiceSchema metadata."""

        model_class = Service
        unknown = EXCLUDE

    id = fields.Str(
        required=True,
        metadata={"description": "Service identifier", "example": "#didcomm-1"},
    )
    type = fields.Str(
        required=True,
        metadata={"description": "Service type", "example": "DIDCommMessaging"},
    )
    service_endpoint = fields.Raw(
        required=False,
        data_key="serviceEndpoint",
        metadata={
            "description": "Service endpoint URI or object",
            "example": "https://example.com/endpoint",
        },
    )


class DIDCommV2Service(Service):
    """DIDComm v2 messaging service."""

    variant = ServiceVariant.DIDCOMM_V2

    class Meta:
        """DIDCommV2Service metadata."""

        schema_class = "DIDCommV2ServiceSchema"

    def __init__(
        self,
        *,
        accept: Optional[Sequence[str]] = None,
        routing_keys: Optional[Sequence[str]] = None,
        **kwargs,
    ):
        """Initialize a DIDCommV2Service instance."""
        super().__init__(**kwargs)
        self.accept = list(accept) if accept else []
        self.routing_keys = list(routing_keys) if routing_keys else []


class DIDCommV2ServiceSchema(ServiceSchema):
    """DIDCommV2Service schema."""

    class Meta:
        """DIDCommV2ServiceSchema metadata."""

        model_class = DIDCommV2Service
        unknown = EXCLUDE

    accept = fields.List(fields.Str(), required=False, allow_none=True)
    routing_keys = fields.List(
        fields.Str(), required=False, allow_none=True, data_key="routingKeys"
    )


class DIDCommV1Service(Service):
    """DIDComm v1 (`did-communication`) service."""

    variant = ServiceVariant.DIDCOMM_V1

    class Meta:
        """DIDCommV1Service metadata."""

        schema_class = "DIDCommV1ServiceSchema"

    def __init__(
        self,
        *,
        recipient_keys: Optional[Sequence[str]] = None,
        routing_keys: Optional[Sequence[str]] = None,
        accept: Optional[Sequence[str]] = None,
        priority: Optional[int] = None,
        **kwargs,
    ):
        """Initialize a DIDCommV1Service instance."""
        super().__init__(**kwargs)
        self.recipient_keys = list(recipient_keys) if recipient_keys else []
        self.routing_keys = list(routing_keys) if routing_keys else []
        self.accept = list(accept) if accept else []
        self.priority = priority if priority is not None else 0


class DIDCommV1ServiceSchema(ServiceSchema):
    """DIDCommV1Service schema."""

    class Meta:
        """DIDCommV1ServiceSchema metadata."""

        model_class = DIDCommV1Service
        unknown = EXCLUDE

    recipient_keys = fields.List(
        fields.Str(), required=False, allow_none=True, data_key="recipientKeys"
    )
    routing_keys = fields.List(
        fields.Str(), required=False, allow_none=True, data_key="routingKeys"
    )
    accept = fields.List(fields.Str(), required=False, allow_none=True)
    priority = fields.Int(required=False, allow_none=True)


class IndyAgentService(Service):
    """Legacy Indy agent service."""

    variant = ServiceVariant.INDY_AGENT

    class Meta:
        """IndyAgentService metadata."""

        schema_class = "IndyAgentServiceSchema"

    def __init__(
        self,
        *,
        recipient_keys: Optional[Sequence[str]] = None,
        routing_keys: Optional[Sequence[str]] = None,
        priority: Optional[int] = None,
        **kwargs,
    ):
        """Initialize an IndyAgentService instance."""
        super().__init__(**kwargs)
        self.recipient_keys = list(recipient_keys) if recipient_keys else []
        self.routing_keys = list(routing_keys) if routing_keys else []
        self.priority = priority if priority is not None else 0


class IndyAgentServiceSchema(ServiceSchema):
    """IndyAgentService schema."""

    class Meta:
        """IndyAgentServiceSchema metadata."""

        model_class = IndyAgentService
        unknown = EXCLUDE

    recipient_keys = fields.List(
        fields.Str(), required=False, allow_none=True, data_key="recipientKeys"
    )
    routing_keys = fields.List(
        fields.Str(), required=False, allow_none=True, data_key="routingKeys"
    )
    priority = fields.Int(required=False, allow_none=True)


SERVICE_TYPES = {
    **{service_type: DIDCommV2Service for service_type in DIDCOMM_V2_SERVICE_TYPES},
    DIDCOMM_V1_SERVICE_TYPE: DIDCommV1Service,
    INDY_AGENT_SERVICE_TYPE: IndyAgentService,
}


def service_class_for_type(service_type: Optional[str]) -> type:
    """Return the service class tagged for a service `type` value."""
    if not isinstance(service_type, str):
        return Service
    return SERVICE_TYPES.get(service_type, Service)


def deserialize_service(value: Mapping[str, Any]) -> Service:
    """Deserialize a service dict into the model class matching its type."""
    return service_class_for_type(value.get("type")).deserialize(value)


class ServiceField(fields.Field):
    """Service entry, loaded into the variant class matching its `type`."""

    default_error_messages = {"invalid": "Service must be an object."}

    def _serialize(self, value, attr, obj, **kwargs):
        if value is None:
            return None
        return value.serialize()

    def _deserialize(self, value, attr, data, **kwargs):
        if not isinstance(value, Mapping):
            raise self.make_error("invalid")
        schema_cls = service_class_for_type(value.get("type"))._get_schema_class()
        return schema_cls(unknown=EXCLUDE).load(value)
