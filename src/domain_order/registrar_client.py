"""
Registrar API client.

Async client for the two registrar operations the order resource needs:
buying a domain and reading it back. Responses are decoded into the
models in ``domain_order.models``. Failures are raised as
``RegistrarAPIError`` and are never retried here.
"""

import time
from typing import Optional
from urllib.parse import quote

import httpx

from .audit_logger import AuditLogger
from .config import RegistrarConfig
from .enums import ErrorCode, LogLevel
from .exceptions import RegistrarAPIError
from .models import BuyDomainsRequest, Domain, GetDomainRequest
from .wire import decode_domain, encode_buy_domains_request

API_PATH = "/domain/v2beta1"
AUTH_HEADER = "X-Auth-Token"


class RegistrarClient:
    """
    Async registrar client.

    Use as an async context manager, or call ``close`` when done.
    """

    COMPONENT = "registrar_client"

    def __init__(
        self,
        config: RegistrarConfig,
        logger: Optional[AuditLogger] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize the registrar client.

        Args:
            config: Endpoint, credentials and timeout
            logger: Optional audit logger
            transport: Optional httpx transport (used by tests)
        """
        self._config = config
        self._logger = logger
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "RegistrarClient":
        self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._config.api_url.rstrip("/") + API_PATH,
                headers={
                    AUTH_HEADER: self._config.secret_key,
                    "Accept": "application/json",
                },
                timeout=httpx.Timeout(self._config.timeout_seconds),
                transport=self._transport,
            )
        return self._client

    async def buy_domains(self, request: BuyDomainsRequest) -> Domain:
        """
        Order the domains in ``request``.

        Returns:
            The domain record as reported by the registrar for the order

        Raises:
            RegistrarAPIError: On HTTP, network or decoding failure
        """
        data = await self._request(
            "POST", "/buy-domains", json=encode_buy_domains_request(request)
        )
        return decode_domain(data)

    async def get_domain(self, request: GetDomainRequest) -> Domain:
        """
        Read a registered domain.

        Raises:
            RegistrarAPIError: On HTTP, network or decoding failure
        """
        data = await self._request("GET", f"/domains/{quote(request.domain, safe='')}")
        return decode_domain(data)

    async def _request(self, method: str, path: str, json: Optional[dict] = None) -> dict:
        client = self._ensure_client()
        start_time = time.perf_counter()

        try:
            response = await client.request(method, path, json=json)
        except httpx.TimeoutException as e:
            raise self._log_failure(RegistrarAPIError(
                message=f"registrar request timed out after {self._config.timeout_seconds}s",
                code=ErrorCode.TIMEOUT,
                details={"method": method, "path": path},
            ), path) from e
        except httpx.TransportError as e:
            raise self._log_failure(RegistrarAPIError(
                message=f"connection error: {e}",
                code=ErrorCode.NETWORK_ERROR,
                details={"method": method, "path": path},
            ), path) from e

        elapsed_ms = (time.perf_counter() - start_time) * 1000

        if response.status_code >= 400:
            raise self._log_failure(RegistrarAPIError(
                message=f"registrar returned HTTP {response.status_code} for {method} {path}",
                code=ErrorCode.API_ERROR,
                details={"method": method, "path": path, "body": _response_body(response)},
                http_status_code=response.status_code,
            ), path)

        try:
            data = response.json()
        except ValueError as e:
            raise self._log_failure(RegistrarAPIError(
                message=f"failed to decode registrar response: {e}",
                code=ErrorCode.PARSE_ERROR,
                details={"method": method, "path": path},
                http_status_code=response.status_code,
            ), path) from e

        if not isinstance(data, dict):
            raise self._log_failure(RegistrarAPIError(
                message="registrar response is not a JSON object",
                code=ErrorCode.PARSE_ERROR,
                details={"method": method, "path": path},
                http_status_code=response.status_code,
            ), path)

        if self._logger:
            self._logger.log(LogLevel.DEBUG, self.COMPONENT, "registrar call succeeded", {
                "method": method,
                "path": path,
                "http_status_code": response.status_code,
                "response_time_ms": round(elapsed_ms, 2),
            })

        return data

    def _log_failure(self, error: RegistrarAPIError, path: str) -> RegistrarAPIError:
        if self._logger:
            self._logger.log_error(
                self.COMPONENT,
                "registrar call failed",
                error=error,
                request_url=path,
                response_status_code=error.http_status_code,
            )
        return error

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None


def _response_body(response: httpx.Response):
    try:
        return response.json()
    except ValueError:
        return response.text
