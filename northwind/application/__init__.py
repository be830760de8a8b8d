"""Application layer: wire DTOs and the order application service."""
