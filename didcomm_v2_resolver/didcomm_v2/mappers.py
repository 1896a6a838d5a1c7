"""Mapping of resolved DID Document parts onto the DIDComm v2 shape.

Both mappers are pure: they build new structures and never modify their input.
"""

import copy
from typing import Any, Callable, Dict, NamedTuple, Sequence

from ..resolver.models import (
    DIDCommV1Service,
    DIDCommV2Service,
    IndyAgentService,
    Service,
    ServiceVariant,
    VerificationMethod,
)
from .models import (
    DIDCommService,
    DIDCommVerificationMethod,
    VerificationMaterial,
    VerificationMaterialFormat,
)


class MaterialRule(NamedTuple):
    """Candidate encoding for verification material."""

    format: VerificationMaterialFormat
    extract: Callable[[VerificationMethod], Any]
    predicate: Callable[[Any], bool] = bool


def _other_material(vm: VerificationMethod):
    return (
        vm.public_key_pem
        or vm.public_key_base64
        or vm.blockchain_account_id
        or vm.ethereum_address
    )


# Evaluated in order; the first rule whose predicate holds wins.
# The final rule always matches, so material is never rejected.
MATERIAL_RULES: Sequence[MaterialRule] = (
    MaterialRule(VerificationMaterialFormat.BASE58, lambda vm: vm.public_key_base58),
    MaterialRule(
        VerificationMaterialFormat.MULTIBASE, lambda vm: vm.public_key_multibase
    ),
    MaterialRule(VerificationMaterialFormat.HEX, lambda vm: vm.public_key_hex),
    MaterialRule(
        VerificationMaterialFormat.JWK,
        lambda vm: copy.deepcopy(vm.public_key_jwk),
        # any JWK object counts, including an empty one
        lambda value: value is not None,
    ),
    MaterialRule(
        VerificationMaterialFormat.OTHER, _other_material, lambda value: True
    ),
)


def map_verification_material(vm: VerificationMethod) -> VerificationMaterial:
    """Select the verification material of `vm` by encoding priority."""
    for rule in MATERIAL_RULES:
        value = rule.extract(vm)
        if rule.predicate(value):
            return VerificationMaterial(format=rule.format.value, value=value)
    raise AssertionError("Verification material rules must end with a catch-all")


def map_verification_method(vm: VerificationMethod) -> DIDCommVerificationMethod:
    """Map a resolved verification method to its DIDComm form."""
    return DIDCommVerificationMethod(
        id=vm.id,
        type=vm.type,
        controller=vm.controller,
        verification_material=map_verification_material(vm),
    )


def _map_didcomm_v2_service(service: DIDCommV2Service) -> DIDCommService:
    return DIDCommService.messaging(
        service.id,
        copy.deepcopy(service.service_endpoint),
        accept=service.accept,
        routing_keys=service.routing_keys,
    )


def _map_didcomm_v1_service(service: DIDCommV1Service) -> DIDCommService:
    return DIDCommService.other(
        service.id,
        {
            "type": service.type,
            "serviceEndpoint": copy.deepcopy(service.service_endpoint),
            "recipientKeys": list(service.recipient_keys),
            "routingKeys": list(service.routing_keys),
            "accept": list(service.accept),
            "priority": service.priority,
        },
    )


def _map_indy_agent_service(service: IndyAgentService) -> DIDCommService:
    return DIDCommService.other(
        service.id,
        {
            "type": service.type,
            "serviceEndpoint": copy.deepcopy(service.service_endpoint),
            "recipientKeys": list(service.recipient_keys),
            "routingKeys": list(service.routing_keys),
            "priority": service.priority,
        },
    )


def _map_generic_service(service: Service) -> DIDCommService:
    return DIDCommService.other(
        service.id,
        {
            "type": service.type,
            "serviceEndpoint": copy.deepcopy(service.service_endpoint),
        },
    )


SERVICE_MAPPERS: Dict[ServiceVariant, Callable[[Service], DIDCommService]] = {
    ServiceVariant.DIDCOMM_V2: _map_didcomm_v2_service,
    ServiceVariant.DIDCOMM_V1: _map_didcomm_v1_service,
    ServiceVariant.INDY_AGENT: _map_indy_agent_service,
    ServiceVariant.GENERIC: _map_generic_service,
}


def map_service(service: Service) -> DIDCommService:
    """Map a resolved service to its DIDComm form according to its variant."""
    mapper = SERVICE_MAPPERS.get(
        getattr(service, "variant", ServiceVariant.GENERIC), _map_generic_service
    )
    return mapper(service)
