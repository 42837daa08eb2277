"""Persistence helpers for scan results."""

from .manifest import Manifest, ManifestError, load_manifest, write_manifest

__all__ = ["Manifest", "ManifestError", "load_manifest", "write_manifest"]
