"""Bundled JSON Schemas."""

from swagvet.schemas.swagger_20 import SWAGGER_20

__all__ = ["SWAGGER_20"]
