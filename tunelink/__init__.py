"""Tunelink - musical entities aggregated from links across music services."""

__version__ = "0.1.0"
