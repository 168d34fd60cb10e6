"""Public API surface for HTTP serving and Python-first interfaces."""

from mystery_forge.api.app import create_app
from mystery_forge.api.python_interface import ForgeApiClient

__all__ = [
    "ForgeApiClient",
    "create_app",
]
