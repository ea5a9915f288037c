"""
API module.

The five idea endpoints, in-process (IdeaService) and over HTTP (IdeaClient).
"""

from ideabox.api.service import IdeaService
from ideabox.api.client import IdeaClient

__all__ = [
    "IdeaService",
    "IdeaClient",
]
