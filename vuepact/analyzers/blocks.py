"""Block segmentation for single-file components."""

from __future__ import annotations

import re

from ..models import Regions

# Each pattern matches the first opening tag of its kind up to the first
# closing tag of the same name. Nested same-named tags end the block early.
_TEMPLATE_BLOCK = re.compile(r"<template\b[^>]*>([\s\S]*?)</template\s*>", re.IGNORECASE)
_SETUP_BLOCK = re.compile(r"<script\b[^>]*\bsetup\b[^>]*>([\s\S]*?)</script\s*>", re.IGNORECASE)
_PLAIN_BLOCK = re.compile(
    r"<script\b(?![^>]*\bsetup\b)[^>]*>([\s\S]*?)</script\s*>", re.IGNORECASE
)


def _first_block(pattern: re.Pattern[str], text: str) -> str:
    match = pattern.search(text)
    return match.group(1) if match else ""


def segment(text: str) -> Regions:
    """Split component source into its template, setup-script, and plain-script regions."""
    return Regions(
        template=_first_block(_TEMPLATE_BLOCK, text),
        script_setup=_first_block(_SETUP_BLOCK, text),
        script=_first_block(_PLAIN_BLOCK, text),
    )


__all__ = ["segment"]
