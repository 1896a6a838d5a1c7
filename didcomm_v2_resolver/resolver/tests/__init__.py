DOC = {
    "@context": "https://w3id.org/did/v1",
    "id": "did:example:1234abcd",
    "verificationMethod": [
        {
            "id": "did:example:1234abcd#4",
            "type": "RsaVerificationKey2018",
            "controller": "did:example:1234abcd",
            "publicKeyPem": "-----BEGIN PUBLIC X…",
        },
        {
            "id": "did:example:1234abcd#5",
            "type": "Ed25519VerificationKey2018",
            "controller": "did:example:1234abcd",
            "publicKeyBase58": "H3C2AVvLMv6gmMNam3uVAjZpfkcJCwDwnZn6z3wXmqPV",
        },
    ],
    "authentication": [
        {
            "id": "did:example:1234abcd#ted",
            "controller": "did:example:1234abcd",
            "type": "Ed25519VerificationKey2020",
            "publicKeyMultibase": "z6MkmjY8GnV5i9YTDtPETC2uUAW6ejw3nk5mXF5yci5ab7th",
        },
        "did:example:1234abcd#5",
    ],
    "keyAgreement": [
        "did:example:1234abcd#4",
        {
            "id": "did:example:1234abcd#x25519",
            "controller": "did:example:1234abcd",
            "type": "X25519KeyAgreementKey2019",
            "publicKeyBase58": "JhNWeSVLMYccCk7iopQW4guaSJTojqpMEELgSLhKwRr",
        },
    ],
    "service": [
        {
            "id": "did:example:1234abcd#didcomm",
            "type": "DIDCommMessaging",
            "serviceEndpoint": "https://example.com/didcomm",
            "accept": ["didcomm/v2"],
            "routingKeys": ["did:example:mediator#key-1"],
        },
        {
            "id": "did:example:1234abcd#did-communication",
            "type": "did-communication",
            "priority": 0,
            "recipientKeys": ["did:example:1234abcd#4"],
            "routingKeys": ["did:example:1234abcd#6"],
            "serviceEndpoint": "http://example.com",
        },
        {
            "id": "did:example:1234abcd#linked-domain",
            "type": "LinkedDomains",
            "serviceEndpoint": "https://example.com",
        },
    ],
}
