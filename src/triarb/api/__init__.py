"""HTTP API for the scanner."""

from triarb.api.server import create_app


__all__ = ["create_app"]
