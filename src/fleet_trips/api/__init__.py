"""HTTP API for the fleet trips service."""
