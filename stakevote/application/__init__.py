"""Application layer: ports and verification services."""
