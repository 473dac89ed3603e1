"""
Base HTTP client for remote entity lookups.

Fetches a single resource by id from an independently owned service and
turns the response into a snapshot or a typed error. Connection failures
and timeouts are retried with exponential backoff; HTTP responses are not.

Dependencies: httpx, tenacity, enrollments_service.core.exceptions
System role: Outbound adapter foundation for the course and student services
"""

import logging
from typing import Generic, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)

from enrollments_service.core.exceptions import (
    InvalidIdentifierError,
    RemoteServiceError,
    RemoteServiceUnavailableError,
    ResourceNotFoundError,
)
from enrollments_service.observability.correlation import (
    CORRELATION_ID_HEADER,
    get_correlation_id,
)

logger = logging.getLogger(__name__)

SnapshotT = TypeVar("SnapshotT", bound=BaseModel)


class RemoteLookupClient(Generic[SnapshotT]):
    """
    Generic single-resource lookup over HTTP.

    Subclasses set the resource path, the snapshot schema, and the error
    types raised for 404 and 422 responses.

    Attributes:
        service_name: Human-readable service name used in errors and logs
        resource_path: Collection path, e.g. "/api/v1/courses"
        snapshot_model: Pydantic model parsed from a 200 body
        not_found_error: Raised on 404
        invalid_id_error: Raised on 422
    """

    service_name: str
    resource_path: str
    snapshot_model: type[SnapshotT]
    not_found_error: type[ResourceNotFoundError]
    invalid_id_error: type[InvalidIdentifierError]

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 5.0,
        retry_attempts: int = 3,
        retry_backoff_seconds: float = 0.2,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize lookup client with its own connection pool.

        Args:
            base_url: Service base URL (scheme, host, port)
            timeout_seconds: Timeout applied to connect, read, write and pool
            retry_attempts: Total attempts on connection failures and timeouts
            retry_backoff_seconds: Initial backoff between attempts
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.retry_attempts = retry_attempts
        self.retry_backoff_seconds = retry_backoff_seconds
        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout_seconds),
            headers={"Accept": "application/json"},
            transport=transport,
        )

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._http.aclose()

    async def _send(self, path: str) -> httpx.Response:
        headers = {}
        correlation_id = get_correlation_id()
        if correlation_id:
            headers[CORRELATION_ID_HEADER] = correlation_id

        async for attempt in AsyncRetrying(
            retry=retry_if_exception_type(httpx.TransportError),
            stop=stop_after_attempt(self.retry_attempts),
            wait=wait_exponential_jitter(
                initial=self.retry_backoff_seconds,
                max=self.retry_backoff_seconds * 10,
                jitter=self.retry_backoff_seconds,
            ),
            before_sleep=lambda retry_state: logger.warning(
                f"{self.service_name} lookup retry {retry_state.attempt_number}/{self.retry_attempts}",
                extra={"path": path, "error": str(retry_state.outcome.exception())},
            ),
            reraise=True,
        ):
            with attempt:
                return await self._http.get(path, headers=headers)

    async def fetch(self, resource_id: str) -> SnapshotT:
        """
        Fetch one resource snapshot by id.

        Args:
            resource_id: Identifier issued by the remote service

        Returns:
            Parsed snapshot

        Raises:
            ResourceNotFoundError: Remote answered 404 (subclass per service)
            InvalidIdentifierError: Remote answered 422 (subclass per service)
            RemoteServiceUnavailableError: Connection failure or timeout
            RemoteServiceError: Any other status, or an unparseable body
        """
        path = f"{self.resource_path}/{quote(resource_id, safe='')}"

        try:
            response = await self._send(path)
        except httpx.TimeoutException as e:
            logger.error(
                f"{self.service_name} lookup timed out",
                extra={"resource_id": resource_id, "error": str(e)},
            )
            raise RemoteServiceUnavailableError(self.service_name, "request timed out") from e
        except httpx.TransportError as e:
            logger.error(
                f"{self.service_name} unreachable",
                extra={"resource_id": resource_id, "error": str(e)},
            )
            raise RemoteServiceUnavailableError(self.service_name, f"unreachable ({type(e).__name__})") from e

        status = response.status_code
        if status == httpx.codes.NOT_FOUND:
            logger.info(
                f"{self.service_name} reported not found",
                extra={"resource_id": resource_id},
            )
            raise self.not_found_error(resource_id)
        if status == httpx.codes.UNPROCESSABLE_ENTITY:
            logger.info(
                f"{self.service_name} rejected identifier",
                extra={"resource_id": resource_id},
            )
            raise self.invalid_id_error(resource_id)
        if status != httpx.codes.OK:
            logger.error(
                f"{self.service_name} returned unexpected status",
                extra={"resource_id": resource_id, "status_code": status},
            )
            raise RemoteServiceError(
                self.service_name,
                f"unexpected status {status}",
                status_code=status,
            )

        try:
            return self.snapshot_model.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(
                f"{self.service_name} returned malformed body",
                extra={"resource_id": resource_id, "error": str(e)},
            )
            raise RemoteServiceError(self.service_name, "malformed response body", status_code=status) from e
