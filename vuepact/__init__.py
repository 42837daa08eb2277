"""Contract extraction for Vue single-file components."""

__version__ = "0.1.0"
