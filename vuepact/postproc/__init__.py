"""Renderers that turn contracts into human-readable output."""

from .report import render_report

__all__ = ["render_report"]
