"""
JSON wire format of the registrar API.

Requests are encoded to JSON-ready dicts with unset optional fields left
out. Responses are decoded field by field, ignoring undefined fields and
falling back to zero values on wrong types, the same way the resource
configuration is read.
"""

from typing import Any, Optional

from .coercion import (
    format_rfc3339,
    get_bool,
    get_int,
    get_map,
    get_optional_string,
    get_string,
    get_string_list,
    parse_rfc3339,
)
from .enums import (
    ContactExtensionFRMode,
    ContactExtensionNLLegalForm,
    ContactLegalForm,
    DNSZoneStatus,
    DomainFeatureStatus,
    DomainRegistrationStatusTransferStatus,
    DomainStatus,
)
from .models import (
    BuyDomainsRequest,
    Contact,
    ContactExtensionEU,
    ContactExtensionFR,
    ContactExtensionFRAssociationInfo,
    ContactExtensionFRCodeAuthAfnicInfo,
    ContactExtensionFRDunsInfo,
    ContactExtensionFRIndividualInfo,
    ContactExtensionFRTrademarkInfo,
    ContactExtensionNL,
    DNSZone,
    Domain,
    DomainDNSSEC,
    DomainRegistrationStatusExternalDomain,
    DomainRegistrationStatusTransfer,
    Money,
    NewContact,
    Tld,
    TldOffer,
)


# ============================================================================
# ENCODING
# ============================================================================

def encode_buy_domains_request(request: BuyDomainsRequest) -> dict:
    body: dict[str, Any] = {
        "domains": list(request.domains),
        "duration_in_years": request.duration_in_years,
        "project_id": request.project_id,
    }
    for role in ("owner", "administrative", "technical"):
        contact_id = getattr(request, f"{role}_contact_id")
        contact = getattr(request, f"{role}_contact")
        if contact_id is not None:
            body[f"{role}_contact_id"] = contact_id
        elif contact is not None:
            body[f"{role}_contact"] = encode_new_contact(contact)
    return body


def encode_new_contact(contact: NewContact) -> dict:
    body: dict[str, Any] = {
        "legal_form": contact.legal_form.value,
        "firstname": contact.firstname,
        "lastname": contact.lastname,
        "email": contact.email,
        "phone_number": contact.phone_number,
        "address_line_1": contact.address_line_1,
        "zip": contact.zip,
        "city": contact.city,
        "country": contact.country,
        "resale": contact.resale,
        "whois_opt_in": contact.whois_opt_in,
    }
    for name in (
        "company_name",
        "email_alt",
        "fax_number",
        "address_line_2",
        "vat_identification_code",
        "company_identification_code",
        "lang",
        "state",
    ):
        value = getattr(contact, name)
        if value is not None:
            body[name] = value

    if contact.extension_fr is not None:
        body["extension_fr"] = encode_contact_extension_fr(contact.extension_fr)
    if contact.extension_eu is not None:
        body["extension_eu"] = {"european_citizenship": contact.extension_eu.european_citizenship}
    if contact.extension_nl is not None:
        body["extension_nl"] = {
            "legal_form": contact.extension_nl.legal_form.value,
            "legal_form_registration_number": contact.extension_nl.legal_form_registration_number,
        }
    return body


def encode_contact_extension_fr(ext: ContactExtensionFR) -> dict:
    body: dict[str, Any] = {"mode": ext.mode.value}
    if ext.individual_info is not None:
        body["individual_info"] = {"whois_opt_in": ext.individual_info.whois_opt_in}
    if ext.duns_info is not None:
        body["duns_info"] = {
            "duns_id": ext.duns_info.duns_id,
            "local_id": ext.duns_info.local_id,
        }
    if ext.association_info is not None:
        association: dict[str, Any] = {
            "publication_jo_page": ext.association_info.publication_jo_page,
        }
        if ext.association_info.publication_jo is not None:
            association["publication_jo"] = format_rfc3339(ext.association_info.publication_jo)
        body["association_info"] = association
    if ext.trademark_info is not None:
        body["trademark_info"] = {"trademark_inpi": ext.trademark_info.trademark_inpi}
    if ext.code_auth_afnic_info is not None:
        body["code_auth_afnic_info"] = {
            "code_auth_afnic": ext.code_auth_afnic_info.code_auth_afnic,
        }
    return body


# ============================================================================
# DECODING
# ============================================================================

def decode_domain(data: dict) -> Domain:
    """Decode a domain record from its JSON representation."""
    dnssec = get_map(data, "dnssec")
    zones = data.get("dns_zones")

    return Domain(
        domain=get_string(data, "domain"),
        organization_id=get_string(data, "organization_id"),
        project_id=get_string(data, "project_id"),
        auto_renew_status=DomainFeatureStatus.parse(data.get("auto_renew_status")),
        dnssec=(
            DomainDNSSEC(status=DomainFeatureStatus.parse(dnssec.get("status")))
            if dnssec is not None else None
        ),
        epp_code=get_string_list(data, "epp_code"),
        expired_at=parse_rfc3339(data.get("expired_at")),
        updated_at=parse_rfc3339(data.get("updated_at")),
        registrar=get_string(data, "registrar"),
        is_external=get_bool(data, "is_external"),
        status=DomainStatus.parse(data.get("status")),
        dns_zones=(
            [decode_dns_zone(zone) for zone in zones if isinstance(zone, dict)]
            if isinstance(zones, list) else None
        ),
        owner_contact=decode_contact(get_map(data, "owner_contact")),
        technical_contact=decode_contact(get_map(data, "technical_contact")),
        administrative_contact=decode_contact(get_map(data, "administrative_contact")),
        external_domain_registration_status=_decode_external_status(
            get_map(data, "external_domain_registration_status")
        ),
        transfer_registration_status=_decode_transfer_status(
            get_map(data, "transfer_registration_status")
        ),
        tld=decode_tld(get_map(data, "tld")),
        linked_products=get_string_list(data, "linked_products"),
        pending_trade=get_bool(data, "pending_trade"),
    )


def decode_contact(data: Optional[dict]) -> Optional[Contact]:
    if data is None:
        return None

    return Contact(
        id=get_string(data, "id"),
        legal_form=ContactLegalForm.parse(data.get("legal_form")),
        firstname=get_string(data, "firstname"),
        lastname=get_string(data, "lastname"),
        company_name=get_string(data, "company_name"),
        email=get_string(data, "email"),
        email_alt=get_string(data, "email_alt"),
        phone_number=get_string(data, "phone_number"),
        fax_number=get_string(data, "fax_number"),
        address_line_1=get_string(data, "address_line_1"),
        address_line_2=get_string(data, "address_line_2"),
        zip=get_string(data, "zip"),
        city=get_string(data, "city"),
        country=get_string(data, "country"),
        vat_identification_code=get_string(data, "vat_identification_code"),
        company_identification_code=get_string(data, "company_identification_code"),
        lang=get_string(data, "lang"),
        resale=get_bool(data, "resale"),
        whois_opt_in=get_bool(data, "whois_opt_in"),
        state=get_string(data, "state"),
        extension_fr=_decode_extension_fr(get_map(data, "extension_fr")),
        extension_eu=_decode_extension_eu(get_map(data, "extension_eu")),
        extension_nl=_decode_extension_nl(get_map(data, "extension_nl")),
    )


def _decode_extension_eu(data: Optional[dict]) -> Optional[ContactExtensionEU]:
    if data is None:
        return None
    return ContactExtensionEU(european_citizenship=get_string(data, "european_citizenship"))


def _decode_extension_nl(data: Optional[dict]) -> Optional[ContactExtensionNL]:
    if data is None:
        return None
    return ContactExtensionNL(
        legal_form=ContactExtensionNLLegalForm.parse(data.get("legal_form")),
        legal_form_registration_number=get_string(data, "legal_form_registration_number"),
    )


def _decode_extension_fr(data: Optional[dict]) -> Optional[ContactExtensionFR]:
    if data is None:
        return None

    ext = ContactExtensionFR(mode=ContactExtensionFRMode.parse(data.get("mode")))

    individual = get_map(data, "individual_info")
    if individual is not None:
        ext.individual_info = ContactExtensionFRIndividualInfo(
            whois_opt_in=get_bool(individual, "whois_opt_in"),
        )
    duns = get_map(data, "duns_info")
    if duns is not None:
        ext.duns_info = ContactExtensionFRDunsInfo(
            duns_id=get_string(duns, "duns_id"),
            local_id=get_string(duns, "local_id"),
        )
    association = get_map(data, "association_info")
    if association is not None:
        ext.association_info = ContactExtensionFRAssociationInfo(
            publication_jo=parse_rfc3339(association.get("publication_jo")),
            publication_jo_page=get_int(association, "publication_jo_page"),
        )
    trademark = get_map(data, "trademark_info")
    if trademark is not None:
        ext.trademark_info = ContactExtensionFRTrademarkInfo(
            trademark_inpi=get_string(trademark, "trademark_inpi"),
        )
    afnic = get_map(data, "code_auth_afnic_info")
    if afnic is not None:
        ext.code_auth_afnic_info = ContactExtensionFRCodeAuthAfnicInfo(
            code_auth_afnic=get_string(afnic, "code_auth_afnic"),
        )
    return ext


def decode_tld(data: Optional[dict]) -> Optional[Tld]:
    if data is None:
        return None

    offers = get_map(data, "offers")
    specifications = get_map(data, "specifications")

    return Tld(
        name=get_string(data, "name"),
        dnssec_support=get_bool(data, "dnssec_support"),
        duration_in_years_min=get_int(data, "duration_in_years_min"),
        duration_in_years_max=get_int(data, "duration_in_years_max"),
        idn_support=get_bool(data, "idn_support"),
        offers=(
            {
                name: _decode_tld_offer(offer)
                for name, offer in offers.items()
                if isinstance(offer, dict)
            }
            if offers is not None else None
        ),
        specifications=(
            {key: value for key, value in specifications.items() if isinstance(value, str)}
            if specifications is not None else None
        ),
    )


def _decode_tld_offer(data: dict) -> TldOffer:
    price = get_map(data, "price")
    return TldOffer(
        action=get_string(data, "action"),
        operation_path=get_string(data, "operation_path"),
        price=(
            Money(
                currency_code=get_string(price, "currency_code"),
                units=_decode_int64(price.get("units")),
                nanos=get_int(price, "nanos"),
            )
            if price is not None else None
        ),
    )


def _decode_int64(value: Any) -> int:
    # int64 values are sent as JSON strings
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return 0
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return 0


def decode_dns_zone(data: dict) -> DNSZone:
    return DNSZone(
        domain=get_string(data, "domain"),
        subdomain=get_string(data, "subdomain"),
        ns=get_string_list(data, "ns"),
        ns_default=get_string_list(data, "ns_default"),
        ns_master=get_string_list(data, "ns_master"),
        status=DNSZoneStatus.parse(data.get("status")),
        message=get_optional_string(data, "message"),
        updated_at=parse_rfc3339(data.get("updated_at")),
        project_id=get_string(data, "project_id"),
    )


def _decode_transfer_status(data: Optional[dict]) -> Optional[DomainRegistrationStatusTransfer]:
    if data is None:
        return None
    return DomainRegistrationStatusTransfer(
        status=DomainRegistrationStatusTransferStatus.parse(data.get("status")),
        vote_current_owner=get_bool(data, "vote_current_owner"),
        vote_new_owner=get_bool(data, "vote_new_owner"),
    )


def _decode_external_status(
    data: Optional[dict],
) -> Optional[DomainRegistrationStatusExternalDomain]:
    if data is None:
        return None
    return DomainRegistrationStatusExternalDomain(
        validation_token=get_string(data, "validation_token"),
    )
