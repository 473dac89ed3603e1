"""Boundary adapters: database and remote service clients."""
