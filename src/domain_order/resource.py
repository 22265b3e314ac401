"""
Order-domain resource lifecycle.

Glue between the infrastructure host and the registrar: validates the
pending configuration, expands it into an order, mints the resource ID and
reads the domain back into flat state. Only create and read exist;
registrar errors propagate to the host unchanged.
"""

from dataclasses import dataclass, field
from typing import Optional

from .audit_logger import AuditLogger
from .enums import LogLevel
from .exceptions import DomainOrderError
from .expand import expand_buy_domains_request
from .flatten import flatten_domain
from .identity import decode_id, encode_id
from .models import GetDomainRequest
from .registrar_client import RegistrarClient
from .validation import ResourceDiff, validate_owner_contact


@dataclass
class ResourceState:
    """Resource ID plus the flat attributes stored by the host."""

    id: str
    attributes: dict = field(default_factory=dict)


class OrderDomainResource:
    """
    Create/read handlers for a registrar domain order.

    Instances hold no per-resource state and can serve any number of
    resources concurrently.
    """

    COMPONENT = "order_domain"

    def __init__(
        self,
        client: RegistrarClient,
        default_project_id: str = "",
        logger: Optional[AuditLogger] = None,
    ) -> None:
        """
        Args:
            client: Registrar client used for all remote calls
            default_project_id: Project used when the configuration sets none
            logger: Optional audit logger
        """
        self._client = client
        self._default_project_id = default_project_id
        self._logger = logger

    def validate(self, diff: ResourceDiff) -> None:
        """
        Plan-time check of a pending configuration.

        Raises:
            ConfigurationError: If the owner contact is missing or doubly set
        """
        validate_owner_contact(diff)

    async def create(self, config: dict) -> ResourceState:
        """
        Order the configured domain and return its state.

        Raises:
            ConfigurationError: Before any remote call, on invalid owner contact
            RegistrarAPIError: If the order or the follow-up read fails
        """
        if not config.get("project_id") and self._default_project_id:
            config = {**config, "project_id": self._default_project_id}

        try:
            self.validate(ResourceDiff.for_create(config))
        except DomainOrderError as e:
            self._log_error("invalid configuration", e, {"domain_name": config.get("domain_name")})
            raise

        request = expand_buy_domains_request(config)
        domain_name = request.domains[0]

        self._log_info("ordering domain", {
            "domain_name": domain_name,
            "project_id": request.project_id,
            "duration_in_years": request.duration_in_years,
        })

        try:
            response = await self._client.buy_domains(request)
        except DomainOrderError as e:
            self._log_error("domain order failed", e, {"domain_name": domain_name})
            raise

        resource_id = encode_id(response.project_id or request.project_id, domain_name)
        self._log_info("domain ordered", {"id": resource_id})

        return await self.read(resource_id)

    async def read(self, resource_id: str) -> ResourceState:
        """
        Read the domain behind ``resource_id`` into flat state.

        Raises:
            InvalidIdentifier: Before any remote call, on a malformed ID
            RegistrarAPIError: If the registrar call fails
        """
        try:
            domain_name = decode_id(resource_id)
        except DomainOrderError as e:
            self._log_error("cannot read domain", e, {"id": resource_id})
            raise

        record = await self._client.get_domain(GetDomainRequest(domain=domain_name))
        self._log_info("domain read", {"id": resource_id, "status": record.status.value})

        return ResourceState(id=resource_id, attributes=flatten_domain(record))

    async def import_state(self, resource_id: str) -> ResourceState:
        """Import an existing domain by ID; the ID is used as-is."""
        return await self.read(resource_id)

    def _log_info(self, message: str, data: dict) -> None:
        if self._logger:
            self._logger.log(LogLevel.INFO, self.COMPONENT, message, data)

    def _log_error(self, message: str, error: Exception, data: dict) -> None:
        if self._logger:
            self._logger.log_error(self.COMPONENT, message, error=error, additional_data=data)
