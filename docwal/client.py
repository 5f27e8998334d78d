"""DocWal API client.

Example usage:
    from docwal import DocWalClient

    client = DocWalClient(api_key="docwal_live_xxxxx")

    result = client.credentials.issue(
        template_id="template-123",
        individual_email="student@example.com",
        credential_data={
            "student_name": "John Doe",
            "degree": "Bachelor of Science",
            "graduation_date": "2024-05-15",
        },
    )
    print(result["doc_id"])
"""

import os
from typing import Any

import httpx

from docwal._internal.http import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    JSON_CONTENT_TYPE,
    create_http_client,
)
from docwal._internal.redaction import redact
from docwal.exceptions import APIError, ConfigError, ParameterError, error_for_status
from docwal.resources import (
    APIKeysResource,
    CredentialsResource,
    TeamResource,
    TemplatesResource,
)


class DocWalClient:
    """Client for the DocWal credential issuance API.

    Holds immutable configuration and one pooled HTTP connection, so a single
    instance can be shared between threads. Resource facades are exposed as
    ``credentials``, ``templates``, ``api_keys`` and ``team``.

    Use `DocWalClient.from_env()` to create a client from environment variables.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        *,
        debug: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: Institution API key (Settings -> API Keys).
            base_url: API base URL (default: production).
            timeout: Request timeout in seconds.
            debug: Enable debug logging to stderr.

        Raises:
            ConfigError: If the API key is empty.
        """
        if not api_key:
            raise ConfigError("api_key is required")

        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._debug = debug
        self._http = create_http_client(
            api_key=api_key,
            timeout=timeout,
            base_url=self._base_url,
        )

        self.credentials = CredentialsResource(self)
        self.templates = TemplatesResource(self)
        self.api_keys = APIKeysResource(self)
        self.team = TeamResource(self)

    @classmethod
    def from_env(cls) -> "DocWalClient":
        """Create a client from environment variables.

        Required environment variables:
            DOCWAL_API_KEY: The institution API key.

        Optional environment variables:
            DOCWAL_BASE_URL: API base URL (default: production).
            DOCWAL_TIMEOUT: Request timeout in seconds.
            DOCWAL_DEBUG: Set to "1" to enable debug logging.

        Raises:
            ConfigError: If DOCWAL_API_KEY is not set.
            ValueError: If DOCWAL_TIMEOUT is not a number.
        """
        api_key = os.environ.get("DOCWAL_API_KEY")
        if not api_key:
            raise ConfigError("DOCWAL_API_KEY environment variable not set")

        base_url = os.environ.get("DOCWAL_BASE_URL") or DEFAULT_BASE_URL
        timeout = float(os.environ.get("DOCWAL_TIMEOUT", str(DEFAULT_TIMEOUT)))
        debug = os.environ.get("DOCWAL_DEBUG", "") == "1"

        return cls(api_key, base_url=base_url, timeout=timeout, debug=debug)

    @property
    def base_url(self) -> str:
        """API base URL without trailing slash."""
        return self._base_url

    @property
    def timeout(self) -> float:
        """Request timeout in seconds."""
        return self._timeout

    @property
    def http_client(self) -> httpx.Client:
        """Underlying httpx client."""
        return self._http

    def close(self) -> None:
        """Release pooled connections."""
        self._http.close()

    def __enter__(self) -> "DocWalClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            import sys

            print(f"[docwal] {message}", file=sys.stderr)

    # =========================================================================
    # Dispatch
    # =========================================================================

    def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        data: dict[str, str] | None = None,
        files: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        raw: bool = False,
    ) -> Any:
        """Send one request to the DocWal API.

        Args:
            method: HTTP method.
            path: Endpoint path relative to the base URL, e.g. "/credentials/".
            json: JSON body.
            data: Multipart text fields (used together with ``files``).
            files: Multipart file fields; switches the body to multipart.
            params: Query string parameters.
            raw: Return the body bytes instead of decoded JSON.

        Returns:
            Decoded JSON body ({} for an empty body), or bytes when ``raw``.

        Raises:
            AuthenticationError: On HTTP 401.
            ValidationError: On HTTP 400.
            NotFoundError: On HTTP 404.
            RateLimitError: On HTTP 429.
            APIError: On any other HTTP error, an undecodable body, or a
                transport failure (status_code 0).
            ParameterError: If the request URL cannot be built.
        """
        headers = {} if files else {"Content-Type": JSON_CONTENT_TYPE}

        if json is not None:
            self._log_debug(f"{method} {path} {redact(json)}")
        else:
            self._log_debug(f"{method} {path}")

        try:
            response = self._http.request(
                method,
                path,
                json=json,
                data=data,
                files=files,
                params=params,
                headers=headers,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise self._error_from_response(e) from e
        except httpx.InvalidURL as e:
            # raised while building the request; nothing was sent
            raise ParameterError(f"Invalid request URL: {e}") from e
        except httpx.HTTPError as e:
            self._log_debug(f"{method} {path} failed: {e}")
            raise APIError(str(e) or type(e).__name__, status_code=0) from e

        self._log_debug(f"{method} {path} -> {response.status_code}")

        if raw:
            return response.content
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as e:
            raise APIError(
                f"Invalid JSON response: {e}",
                status_code=response.status_code,
                response_body=response.text,
            ) from e

    def _error_from_response(self, error: httpx.HTTPStatusError) -> APIError:
        """Classify an HTTP error response into a typed error."""
        response = error.response
        try:
            body: Any = response.json()
        except ValueError:
            body = response.text or None

        message = _extract_message(body) or str(error)
        self._log_debug(f"HTTP {response.status_code}: {message}")
        return error_for_status(response.status_code, message, response_body=body)


def _extract_message(body: Any) -> str | None:
    """Pull a human-readable message out of an error body.

    Handles {"error": "..."}, {"error": {"message": "..."}} and {"detail": "..."}.
    """
    if not isinstance(body, dict):
        return None
    error_field = body.get("error")
    if isinstance(error_field, str) and error_field:
        return error_field
    if isinstance(error_field, dict):
        nested = error_field.get("message")
        if isinstance(nested, str) and nested:
            return nested
    detail = body.get("detail")
    if isinstance(detail, str) and detail:
        return detail
    return None
