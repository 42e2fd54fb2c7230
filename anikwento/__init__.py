"""Anikwento backend configuration and schema tooling."""

__version__ = "0.1.0"
