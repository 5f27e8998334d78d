"""DocWal SDK for Python.

Issue and manage verifiable digital credentials through the DocWal API.

Public API:
    DocWalClient - API client exposing credentials, templates, api_keys and team
    exceptions - Error taxonomy (APIError and its status-specific subclasses)
    models - Request payload models, also importable from docwal.models
"""

from docwal._version import __version__
from docwal.client import DocWalClient
from docwal.exceptions import (
    APIError,
    AuthenticationError,
    ConfigError,
    DocWalError,
    ErrorKind,
    NotFoundError,
    ParameterError,
    RateLimitError,
    ValidationError,
)
from docwal.models import (
    BatchCredential,
    BatchIssue,
    ClaimLinkResend,
    CredentialIssue,
    CredentialListQuery,
    Role,
    RoleUpdate,
    TeamInvite,
    TemplateCreate,
)

__all__ = [
    "__version__",
    "DocWalClient",
    # Errors
    "APIError",
    "AuthenticationError",
    "ConfigError",
    "DocWalError",
    "ErrorKind",
    "NotFoundError",
    "ParameterError",
    "RateLimitError",
    "ValidationError",
    # Request models
    "BatchCredential",
    "BatchIssue",
    "ClaimLinkResend",
    "CredentialIssue",
    "CredentialListQuery",
    "Role",
    "RoleUpdate",
    "TeamInvite",
    "TemplateCreate",
]
