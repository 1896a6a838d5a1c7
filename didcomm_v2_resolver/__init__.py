"""DIDComm v2 DID resolution adapter."""
