"""Resource facades grouping DocWal endpoints by domain."""

from docwal.resources.api_keys import APIKeysResource
from docwal.resources.credentials import CredentialsResource
from docwal.resources.team import TeamResource
from docwal.resources.templates import TemplatesResource

__all__ = [
    "APIKeysResource",
    "CredentialsResource",
    "TeamResource",
    "TemplatesResource",
]
