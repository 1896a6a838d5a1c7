"""DIDComm v2 support: adapting resolved DID Documents for the messaging layer."""
