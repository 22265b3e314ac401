"""
Property-based tests for the expand transform.

Uses Hypothesis to check contact precedence, optional-field existence
semantics, extension defaults and the tolerance to malformed values.
"""

from datetime import datetime, timezone

from hypothesis import given, settings, assume
from hypothesis import strategies as st

from domain_order.enums import (
    ContactExtensionFRMode,
    ContactExtensionNLLegalForm,
    ContactLegalForm,
)
from domain_order.expand import (
    CONTACT_ROLES,
    NEW_CONTACT_OPTIONAL_FIELDS,
    expand_buy_domains_request,
    expand_contact,
    expand_contact_extension_eu,
    expand_contact_extension_fr,
    expand_contact_extension_nl,
    expand_new_contact,
)
from domain_order.models import (
    BuyDomainsRequest,
    ContactExtensionFRAssociationInfo,
    ContactExtensionFRDunsInfo,
)


REQUIRED_FIELDS = (
    "phone_number",
    "firstname",
    "lastname",
    "email",
    "address_line_1",
    "zip",
    "city",
    "country",
)


@st.composite
def contact_map_strategy(draw) -> dict:
    """Generate inline contact maps with a random subset of optional keys."""
    contact = {name: draw(st.text(max_size=30)) for name in REQUIRED_FIELDS}
    contact["legal_form"] = draw(st.sampled_from([f.value for f in ContactLegalForm]))

    for name in NEW_CONTACT_OPTIONAL_FIELDS:
        if draw(st.booleans()):
            contact[name] = draw(st.text(max_size=20))

    if draw(st.booleans()):
        contact["resale"] = draw(st.booleans())
    if draw(st.booleans()):
        contact["whois_opt_in"] = draw(st.booleans())
    return contact


def minimal_contact() -> dict:
    return {
        "legal_form": "individual",
        "firstname": "Ada",
        "lastname": "Lovelace",
        "email": "ada@example.com",
        "phone_number": "+33.123456789",
        "address_line_1": "1 rue de la Paix",
        "zip": "75002",
        "city": "Paris",
        "country": "FR",
    }


class TestOrderScenario:
    """Expansion of a complete resource configuration."""

    def test_full_create_by_owner_reference(self) -> None:
        request = expand_buy_domains_request({
            "domain_name": "example.com",
            "duration_in_years": 2,
            "project_id": "proj-1",
            "owner_contact_id": "contact-9",
        })

        assert request == BuyDomainsRequest(
            domains=["example.com"],
            duration_in_years=2,
            project_id="proj-1",
            owner_contact_id="contact-9",
        )
        assert request.owner_contact is None
        assert request.administrative_contact_id is None
        assert request.administrative_contact is None
        assert request.technical_contact_id is None
        assert request.technical_contact is None

    def test_duration_defaults_to_one_year(self) -> None:
        request = expand_buy_domains_request({"domain_name": "example.com"})
        assert request.duration_in_years == 1
        assert request.project_id == ""


class TestContactPrecedence:
    """A non-empty contact ID wins over an inline contact, per role."""

    @given(
        role=st.sampled_from(CONTACT_ROLES),
        contact_id=st.text(min_size=1, max_size=20),
        contact=contact_map_strategy(),
    )
    @settings(max_examples=100)
    def test_id_wins_over_inline_contact(self, role: str, contact_id: str, contact: dict) -> None:
        request = expand_buy_domains_request({
            "domain_name": "example.com",
            f"{role}_contact_id": contact_id,
            f"{role}_contact": contact,
        })

        assert getattr(request, f"{role}_contact_id") == contact_id
        assert getattr(request, f"{role}_contact") is None

    @given(role=st.sampled_from(CONTACT_ROLES), contact=contact_map_strategy())
    @settings(max_examples=100)
    def test_empty_id_falls_back_to_inline_contact(self, role: str, contact: dict) -> None:
        request = expand_buy_domains_request({
            "domain_name": "example.com",
            f"{role}_contact_id": "",
            f"{role}_contact": contact,
        })

        assert getattr(request, f"{role}_contact_id") is None
        assert getattr(request, f"{role}_contact") == expand_new_contact(contact)

    @given(role=st.sampled_from(CONTACT_ROLES))
    def test_role_omitted_when_neither_form_set(self, role: str) -> None:
        request = expand_buy_domains_request({
            "domain_name": "example.com",
            f"{role}_contact_id": "",
            f"{role}_contact": {},
        })

        assert getattr(request, f"{role}_contact_id") is None
        assert getattr(request, f"{role}_contact") is None

    def test_roles_are_independent(self) -> None:
        request = expand_buy_domains_request({
            "domain_name": "example.fr",
            "owner_contact": minimal_contact(),
            "administrative_contact_id": "admin-1",
        })

        assert request.owner_contact is not None
        assert request.owner_contact.firstname == "Ada"
        assert request.administrative_contact_id == "admin-1"
        assert request.technical_contact is None
        assert request.technical_contact_id is None

    def test_wrong_typed_contact_is_absent(self) -> None:
        request = expand_buy_domains_request({
            "domain_name": "example.com",
            "owner_contact": "not-a-map",
            "technical_contact_id": 42,
        })
        assert request.owner_contact is None
        assert request.technical_contact_id is None


class TestNewContactFields:
    """Existence semantics of optional fields and zero-value degradation."""

    def test_explicit_empty_fax_is_forwarded(self) -> None:
        contact = minimal_contact()
        contact["fax_number"] = ""

        assert expand_new_contact(contact).fax_number == ""

    def test_missing_fax_is_unset(self) -> None:
        assert expand_new_contact(minimal_contact()).fax_number is None

    @given(contact=contact_map_strategy())
    @settings(max_examples=200)
    def test_optional_fields_follow_key_existence(self, contact: dict) -> None:
        """
        *For any* contact map, an optional field is set iff its key exists,
        and then carries exactly the source value (empty included).
        """
        expanded = expand_new_contact(contact)

        for name in NEW_CONTACT_OPTIONAL_FIELDS:
            if name in contact:
                assert getattr(expanded, name) == contact[name]
            else:
                assert getattr(expanded, name) is None

    @given(contact=contact_map_strategy())
    @settings(max_examples=100)
    def test_required_fields_copied(self, contact: dict) -> None:
        expanded = expand_new_contact(contact)

        for name in REQUIRED_FIELDS:
            assert getattr(expanded, name) == contact[name]
        assert expanded.legal_form == ContactLegalForm(contact["legal_form"])
        assert expanded.resale == contact.get("resale", False)
        assert expanded.whois_opt_in == contact.get("whois_opt_in", False)

    def test_missing_required_fields_degrade_to_zero_values(self) -> None:
        expanded = expand_new_contact({"firstname": 12, "resale": "yes"})

        assert expanded.firstname == ""
        assert expanded.lastname == ""
        assert expanded.email == ""
        assert expanded.legal_form == ContactLegalForm.LEGAL_FORM_UNKNOWN
        assert expanded.resale is False

    def test_none_contact(self) -> None:
        assert expand_new_contact(None) is None
        assert expand_contact(None) is None

    def test_lang_forwarded_when_set(self) -> None:
        contact = minimal_contact()
        contact["lang"] = "fr_FR"
        assert expand_new_contact(contact).lang == "fr_FR"
        assert expand_new_contact(minimal_contact()).lang is None


class TestFullContact:
    """The full contact only keeps non-empty optional values."""

    def test_empty_optional_values_not_copied(self) -> None:
        contact = minimal_contact()
        contact["company_name"] = ""
        contact["state"] = "Ile-de-France"
        contact["lang"] = "fr_FR"

        expanded = expand_contact(contact)

        assert expanded.company_name == ""
        assert expanded.state == "Ile-de-France"
        assert expanded.lang == "fr_FR"
        assert expanded.id == ""


class TestExtensions:
    """Jurisdiction extensions: presence rules, enum defaults, nested blocks."""

    def test_fr_mode_defaults_to_unknown(self) -> None:
        ext = expand_contact_extension_fr({"duns_info": {"duns_id": "123"}})

        assert ext.mode == ContactExtensionFRMode.MODE_UNKNOWN
        assert ext.mode.value == "mode_unknown"

    def test_fr_unknown_mode_tag_defaults_to_unknown(self) -> None:
        ext = expand_contact_extension_fr({"mode": "telepathy"})
        assert ext.mode == ContactExtensionFRMode.MODE_UNKNOWN

    @given(mode=st.sampled_from(list(ContactExtensionFRMode)))
    def test_fr_mode_parsed(self, mode: ContactExtensionFRMode) -> None:
        assert expand_contact_extension_fr({"mode": mode.value}).mode == mode

    def test_nl_legal_form_defaults_to_unknown(self) -> None:
        ext = expand_contact_extension_nl({"legal_form_registration_number": "42"})

        assert ext.legal_form == ContactExtensionNLLegalForm.LEGAL_FORM_UNKNOWN
        assert ext.legal_form_registration_number == "42"

    def test_eu_citizenship(self) -> None:
        assert expand_contact_extension_eu({"european_citizenship": "DE"}).european_citizenship == "DE"
        assert expand_contact_extension_eu({"european_citizenship": 3}).european_citizenship == ""

    def test_fr_info_blocks_absent_unless_present(self) -> None:
        ext = expand_contact_extension_fr({
            "mode": "duns",
            "duns_info": {"duns_id": "123", "local_id": "L-1"},
        })

        assert ext.duns_info == ContactExtensionFRDunsInfo(duns_id="123", local_id="L-1")
        assert ext.individual_info is None
        assert ext.association_info is None
        assert ext.trademark_info is None
        assert ext.code_auth_afnic_info is None

    def test_fr_all_blocks_independently_optional(self) -> None:
        ext = expand_contact_extension_fr({
            "mode": "individual",
            "individual_info": {"whois_opt_in": True},
            "trademark_info": {"trademark_inpi": "INPI-1"},
            "code_auth_afnic_info": {"code_auth_afnic": "AF-1"},
        })

        assert ext.individual_info.whois_opt_in is True
        assert ext.trademark_info.trademark_inpi == "INPI-1"
        assert ext.code_auth_afnic_info.code_auth_afnic == "AF-1"
        assert ext.duns_info is None

    def test_malformed_publication_date_dropped(self) -> None:
        ext = expand_contact_extension_fr({
            "mode": "association",
            "association_info": {
                "publication_jo": "not-a-date",
                "publication_jo_page": 12.0,
            },
            "trademark_info": {"trademark_inpi": "INPI-1"},
        })

        assert ext.association_info == ContactExtensionFRAssociationInfo(
            publication_jo=None,
            publication_jo_page=12,
        )
        assert ext.mode == ContactExtensionFRMode.ASSOCIATION
        assert ext.trademark_info.trademark_inpi == "INPI-1"

    def test_publication_date_parsed(self) -> None:
        ext = expand_contact_extension_fr({
            "association_info": {"publication_jo": "2021-03-04T05:06:07Z"},
        })

        assert ext.association_info.publication_jo == datetime(
            2021, 3, 4, 5, 6, 7, tzinfo=timezone.utc
        )
        assert ext.association_info.publication_jo_page == 0

    @given(page=st.floats(min_value=0, max_value=2**32 - 1, allow_nan=False))
    @settings(max_examples=100)
    def test_publication_page_truncated(self, page: float) -> None:
        ext = expand_contact_extension_fr({"association_info": {"publication_jo_page": page}})
        assert ext.association_info.publication_jo_page == int(page)

    @given(page=st.one_of(st.integers(), st.text(), st.booleans()))
    @settings(max_examples=50)
    def test_publication_page_only_from_float(self, page) -> None:
        ext = expand_contact_extension_fr({"association_info": {"publication_jo_page": page}})
        assert ext.association_info.publication_jo_page == 0

    def test_non_finite_page_does_not_raise(self) -> None:
        ext = expand_contact_extension_fr(
            {"association_info": {"publication_jo_page": float("nan")}}
        )
        assert ext.association_info.publication_jo_page == 0

    def test_empty_or_missing_extension_maps_are_absent(self) -> None:
        contact = minimal_contact()
        contact["extension_fr"] = {}
        contact["extension_eu"] = "DE"

        expanded = expand_new_contact(contact)

        assert expanded.extension_fr is None
        assert expanded.extension_eu is None
        assert expanded.extension_nl is None

    def test_extensions_attached_to_new_contact(self) -> None:
        contact = minimal_contact()
        contact["extension_eu"] = {"european_citizenship": "BE"}
        contact["extension_nl"] = {"legal_form": "foundation"}

        expanded = expand_new_contact(contact)

        assert expanded.extension_eu.european_citizenship == "BE"
        assert expanded.extension_nl.legal_form == ContactExtensionNLLegalForm.FOUNDATION

    @given(value=st.one_of(st.none(), st.integers(), st.text(), st.lists(st.integers())))
    @settings(max_examples=50)
    def test_malformed_info_block_is_absent(self, value) -> None:
        assume(not isinstance(value, dict))
        ext = expand_contact_extension_fr({"mode": "duns", "duns_info": value})
        assert ext.duns_info is None
