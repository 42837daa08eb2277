"""Read-only HTTP viewer over scan manifests."""

from .app import create_app, run_service

__all__ = ["create_app", "run_service"]
