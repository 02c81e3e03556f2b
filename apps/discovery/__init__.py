"""Discovery API - nearby business discovery service."""
