from copy import deepcopy
from unittest import TestCase

from ...resolver.models import (
    DIDCommV1Service,
    DIDCommV2Service,
    IndyAgentService,
    Service,
    VerificationMethod,
)
from .. import mappers as test_module
from ..mappers import map_service, map_verification_method
from ..models import ServiceKind

VM_ID = "did:example:123#key-1"
CONTROLLER = "did:example:123"
JWK = {"kty": "OKP", "crv": "X25519", "x": "avH0O2Y4tqLAq8y9zpianr8ajii5m4F_mICrzNlatXs"}


def make_vm(**material):
    return VerificationMethod(
        id=VM_ID, type="JsonWebKey2020", controller=CONTROLLER, **material
    )


class TestMapVerificationMethod(TestCase):
    def test_copies_identity_fields(self):
        mapped = map_verification_method(make_vm(public_key_hex="ff00"))
        assert mapped.id == VM_ID
        assert mapped.type == "JsonWebKey2020"
        assert mapped.controller == CONTROLLER

    def test_base58_wins_over_other_material(self):
        mapped = map_verification_method(
            make_vm(public_key_base58="abc", public_key_hex="ff00")
        )
        assert mapped.verification_material.serialize() == {
            "format": "Base58",
            "value": "abc",
        }

    def test_priority_order(self):
        cases = [
            (
                {"public_key_multibase": "z6Mk", "public_key_hex": "ff00"},
                ("Multibase", "z6Mk"),
            ),
            ({"public_key_hex": "ff00", "public_key_jwk": JWK}, ("Hex", "ff00")),
            ({"public_key_jwk": JWK, "public_key_pem": "pem"}, ("JWK", JWK)),
            (
                {"public_key_pem": "pem", "public_key_base64": "b64"},
                ("Other", "pem"),
            ),
            (
                {"public_key_base64": "b64", "blockchain_account_id": "acct"},
                ("Other", "b64"),
            ),
            (
                {"blockchain_account_id": "acct", "ethereum_address": "0xabc"},
                ("Other", "acct"),
            ),
            ({"ethereum_address": "0xabc"}, ("Other", "0xabc")),
        ]
        for material, (expected_format, expected_value) in cases:
            with self.subTest(material=material):
                mapped = map_verification_method(make_vm(**material))
                assert mapped.verification_material.format == expected_format
                assert mapped.verification_material.value == expected_value

    def test_empty_string_is_not_populated(self):
        mapped = map_verification_method(
            make_vm(public_key_base58="", public_key_multibase="z6Mk")
        )
        assert mapped.verification_material.format == "Multibase"

    def test_empty_jwk_is_populated(self):
        mapped = map_verification_method(make_vm(public_key_jwk={}))
        assert mapped.verification_material.format == "JWK"
        assert mapped.verification_material.value == {}

    def test_no_material_degrades_to_other(self):
        mapped = map_verification_method(make_vm())
        assert mapped.verification_material.format == "Other"
        assert mapped.verification_material.value is None
        assert mapped.verification_material.serialize() == {"format": "Other"}

    def test_jwk_is_copied(self):
        jwk = deepcopy(JWK)
        vm = make_vm(public_key_jwk=jwk)
        mapped = map_verification_method(vm)
        mapped.verification_material.value["x"] = "changed"
        assert vm.public_key_jwk == JWK

    def test_idempotent(self):
        vm = make_vm(public_key_jwk=deepcopy(JWK))
        assert map_verification_method(vm) == map_verification_method(vm)

    def test_rules_end_with_catch_all(self):
        last = test_module.MATERIAL_RULES[-1]
        assert last.format.value == "Other"
        assert last.predicate(None)


class TestMapService(TestCase):
    def test_didcomm_v2_defaults(self):
        service = DIDCommV2Service(
            id="#didcomm",
            type="DIDCommMessaging",
            service_endpoint="https://example.com",
        )
        assert map_service(service).serialize() == {
            "id": "#didcomm",
            "kind": {
                "DIDCommMessaging": {
                    "service_endpoint": "https://example.com",
                    "accept": [],
                    "routing_keys": [],
                }
            },
        }

    def test_didcomm_v2(self):
        service = DIDCommV2Service(
            id="#didcomm",
            type="DIDCommMessaging",
            service_endpoint="https://example.com",
            accept=["didcomm/v2"],
            routing_keys=["did:example:mediator#key-1"],
        )
        mapped = map_service(service)
        assert mapped.kind_tag is ServiceKind.DIDCOMM_MESSAGING
        assert mapped.kind_value["accept"] == ["didcomm/v2"]
        assert mapped.kind_value["routing_keys"] == ["did:example:mediator#key-1"]

        mapped.kind_value["routing_keys"].append("other")
        assert service.routing_keys == ["did:example:mediator#key-1"]

    def test_didcomm_v1(self):
        service = DIDCommV1Service(
            id="#did-communication",
            type="did-communication",
            service_endpoint="http://example.com",
            routing_keys=["did:example:1234abcd#6"],
            priority=1,
        )
        assert map_service(service).serialize() == {
            "id": "#did-communication",
            "kind": {
                "Other": {
                    "type": "did-communication",
                    "serviceEndpoint": "http://example.com",
                    "recipientKeys": [],
                    "routingKeys": ["did:example:1234abcd#6"],
                    "accept": [],
                    "priority": 1,
                }
            },
        }

    def test_indy_agent(self):
        service = IndyAgentService(
            id="#indy",
            type="IndyAgent",
            service_endpoint="http://example.com",
            recipient_keys=["H3C2AVvLMv6gmMNam3uVAjZpfkcJCwDwnZn6z3wXmqPV"],
        )
        assert map_service(service).serialize() == {
            "id": "#indy",
            "kind": {
                "Other": {
                    "type": "IndyAgent",
                    "serviceEndpoint": "http://example.com",
                    "recipientKeys": ["H3C2AVvLMv6gmMNam3uVAjZpfkcJCwDwnZn6z3wXmqPV"],
                    "routingKeys": [],
                    "priority": 0,
                }
            },
        }

    def test_generic(self):
        service = Service(id="s1", type="Foo", service_endpoint="e")
        assert map_service(service).serialize() == {
            "id": "s1",
            "kind": {"Other": {"type": "Foo", "serviceEndpoint": "e"}},
        }

    def test_unrecognized_variant_falls_back(self):
        class OddService(Service):
            variant = "something-else"

        mapped = map_service(OddService(id="s1", type="Foo", service_endpoint="e"))
        assert mapped.kind == {"Other": {"type": "Foo", "serviceEndpoint": "e"}}

    def test_endpoint_object_is_copied(self):
        endpoint = {"uri": "https://example.com", "accept": ["didcomm/v2"]}
        service = DIDCommV2Service(
            id="#didcomm", type="DIDCommMessaging", service_endpoint=endpoint
        )
        mapped = map_service(service)
        mapped.kind_value["service_endpoint"]["uri"] = "changed"
        assert endpoint["uri"] == "https://example.com"

    def test_idempotent(self):
        service = DIDCommV1Service(
            id="#1", type="did-communication", service_endpoint="http://e"
        )
        assert map_service(service) == map_service(service)

    def test_every_variant_has_a_mapper(self):
        from ...resolver.models import ServiceVariant

        assert set(test_module.SERVICE_MAPPERS) == set(ServiceVariant)
