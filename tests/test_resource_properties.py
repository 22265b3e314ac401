"""
Property-based tests for the order-domain resource lifecycle.

Covers create and read end to end over ``httpx.MockTransport``, and checks
that invalid input is rejected before any registrar call is made.
"""

import asyncio
import io
import json

import httpx
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from domain_order.audit_logger import AuditLogger
from domain_order.config import RegistrarConfig
from domain_order.enums import ErrorCode, LogLevel
from domain_order.exceptions import ConfigurationError, InvalidIdentifier, RegistrarAPIError
from domain_order.registrar_client import RegistrarClient
from domain_order.resource import OrderDomainResource, ResourceState
from domain_order.validation import ResourceDiff


class FakeRegistrar:
    """In-memory registrar answering buy-domains and get-domain."""

    def __init__(self, order_project_id: str = "proj-1", fail_with: int = 0):
        self.requests: list[httpx.Request] = []
        self.ordered: dict[str, dict] = {}
        self.order_project_id = order_project_id
        self.fail_with = fail_with

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with:
            return httpx.Response(self.fail_with, json={"message": "rejected"})

        if request.method == "POST" and request.url.path.endswith("/buy-domains"):
            body = json.loads(request.content)
            for name in body["domains"]:
                self.ordered[name] = body
            return httpx.Response(200, json={
                "domains": body["domains"],
                "organization_id": "org-1",
                "project_id": self.order_project_id,
            })

        name = request.url.path.rsplit("/", 1)[-1]
        body = self.ordered.get(name)
        if body is None:
            return httpx.Response(404, json={"message": "not found"})
        return httpx.Response(200, json={
            "domain": name,
            "organization_id": "org-1",
            "project_id": body["project_id"],
            "status": "creating",
            "auto_renew_status": "disabled",
            "owner_contact": {"id": body.get("owner_contact_id", "generated")},
        })


def run_resource(registrar: FakeRegistrar, operation, default_project_id: str = "", logger=None):
    async def run():
        config = RegistrarConfig(api_url="https://api.example.test", secret_key="secret")
        transport = httpx.MockTransport(registrar)
        async with RegistrarClient(config, transport=transport) as client:
            resource = OrderDomainResource(
                client, default_project_id=default_project_id, logger=logger
            )
            return await operation(resource)

    return asyncio.run(run())


class TestCreate:
    """Create orders the domain and reads it back."""

    def test_create_with_owner_reference(self) -> None:
        registrar = FakeRegistrar()
        config = {
            "domain_name": "example.com",
            "duration_in_years": 2,
            "project_id": "proj-1",
            "owner_contact_id": "contact-9",
        }

        state = run_resource(registrar, lambda resource: resource.create(config))

        assert isinstance(state, ResourceState)
        assert state.id == "proj-1/example.com"
        assert state.attributes["domain_name"] == "example.com"
        assert state.attributes["status"] == "creating"
        assert [r.method for r in registrar.requests] == ["POST", "GET"]
        assert registrar.ordered["example.com"]["duration_in_years"] == 2

    def test_create_uses_default_project(self) -> None:
        registrar = FakeRegistrar(order_project_id="")
        config = {"domain_name": "example.fr", "owner_contact_id": "contact-9"}

        state = run_resource(
            registrar, lambda resource: resource.create(config), default_project_id="proj-default"
        )

        assert state.id == "proj-default/example.fr"
        assert registrar.ordered["example.fr"]["project_id"] == "proj-default"

    def test_create_with_inline_owner(self) -> None:
        registrar = FakeRegistrar()
        config = {
            "domain_name": "example.eu",
            "project_id": "proj-1",
            "owner_contact": {
                "legal_form": "individual",
                "firstname": "Ada",
                "lastname": "Lovelace",
                "email": "ada@example.com",
                "extension_eu": {"european_citizenship": "FR"},
            },
        }

        state = run_resource(registrar, lambda resource: resource.create(config))

        sent = registrar.ordered["example.eu"]
        assert sent["owner_contact"]["firstname"] == "Ada"
        assert sent["owner_contact"]["extension_eu"] == {"european_citizenship": "FR"}
        assert "owner_contact_id" not in sent
        assert state.id == "proj-1/example.eu"

    @given(
        contact_id=st.sampled_from(["", None]),
        contact=st.sampled_from([{}, None]),
    )
    @settings(max_examples=10)
    def test_missing_owner_makes_no_calls(self, contact_id, contact) -> None:
        registrar = FakeRegistrar()
        config = {
            "domain_name": "example.com",
            "owner_contact_id": contact_id,
            "owner_contact": contact,
        }

        with pytest.raises(ConfigurationError):
            run_resource(registrar, lambda resource: resource.create(config))

        assert registrar.requests == []

    def test_both_owner_forms_make_no_calls(self) -> None:
        registrar = FakeRegistrar()
        config = {
            "domain_name": "example.com",
            "owner_contact_id": "contact-9",
            "owner_contact": {"firstname": "Ada"},
        }

        with pytest.raises(ConfigurationError):
            run_resource(registrar, lambda resource: resource.create(config))

        assert registrar.requests == []

    def test_registrar_error_propagates(self) -> None:
        registrar = FakeRegistrar(fail_with=409)
        stream = io.StringIO()
        logger = AuditLogger(output_format="text", output_stream=stream)
        config = {"domain_name": "taken.com", "owner_contact_id": "contact-9"}

        with pytest.raises(RegistrarAPIError) as exc_info:
            run_resource(registrar, lambda resource: resource.create(config), logger=logger)

        assert exc_info.value.code == ErrorCode.API_ERROR
        assert exc_info.value.http_status_code == 409
        assert len(registrar.requests) == 1
        assert any(
            entry.level == LogLevel.ERROR and entry.message == "domain order failed"
            for entry in logger.entries
        )

    def test_caller_config_not_mutated(self) -> None:
        config = {"domain_name": "example.com", "owner_contact_id": "contact-9"}
        run_resource(
            FakeRegistrar(), lambda resource: resource.create(config), default_project_id="proj-1"
        )
        assert "project_id" not in config


class TestRead:
    """Read decodes the ID and flattens the domain."""

    def test_invalid_identifier_makes_no_calls(self) -> None:
        registrar = FakeRegistrar()

        with pytest.raises(InvalidIdentifier):
            run_resource(registrar, lambda resource: resource.read("onlyonepart"))

        assert registrar.requests == []

    def test_read_unknown_domain(self) -> None:
        with pytest.raises(RegistrarAPIError) as exc_info:
            run_resource(FakeRegistrar(), lambda resource: resource.read("proj-1/missing.com"))

        assert exc_info.value.http_status_code == 404

    def test_import_uses_id_as_is(self) -> None:
        registrar = FakeRegistrar()
        registrar.ordered["example.com"] = {"project_id": "proj-1", "owner_contact_id": "c"}

        state = run_resource(registrar, lambda resource: resource.import_state("proj-1/example.com"))

        assert state.id == "proj-1/example.com"
        assert state.attributes["project_id"] == "proj-1"
        assert "id" not in state.attributes["owner_contact"]


class TestValidate:
    """Plan-time validation hook."""

    def test_validate_delegates_to_owner_check(self) -> None:
        resource = OrderDomainResource(client=None)

        resource.validate(ResourceDiff.for_create({"owner_contact_id": "contact-9"}))
        with pytest.raises(ConfigurationError):
            resource.validate(ResourceDiff.for_create({}))
