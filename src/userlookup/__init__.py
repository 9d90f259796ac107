"""User lookup service exposing REST and GraphQL surfaces."""

__version__ = "0.1.0"
