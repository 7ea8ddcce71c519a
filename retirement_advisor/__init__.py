"""Retirement planning advisor: calculation engine plus chat tooling."""

__version__ = "0.1.0"
