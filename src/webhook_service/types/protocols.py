"""Protocol definitions for component interfaces."""

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from webhook_service.types.models import Response


@runtime_checkable
class HTTPTransport(Protocol):
    """Protocol for the outbound HTTP call.

    A transport performs exactly one POST per call and never retries; retry
    policy belongs to the dispatcher.
    """

    async def post(
        self,
        url: str,
        *,
        headers: Mapping[str, str],
        body: bytes,
        timeout: float,
    ) -> Response:
        """Send HTTP POST request with timeout.

        Args:
            url: Target URL for the POST request
            headers: Request headers
            body: Encoded request body
            timeout: Request timeout in seconds (keyword-only)

        Returns:
            HTTP response with status, headers, and body

        Raises:
            TransportError: If the request could not be completed
        """
        ...
