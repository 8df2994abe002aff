"""Application layer: ports and use cases for the UDP sink."""
