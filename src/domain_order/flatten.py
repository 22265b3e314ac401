"""
Flatten registrar response objects into resource state maps.

The mirror of ``expand``: every nested object that is ``None`` produces an
absent key, never an empty placeholder, so the host does not see a
spurious difference on its next plan. Timestamps render as RFC 3339 text
and enums as their string tag.
"""

from typing import Optional

from .coercion import format_rfc3339
from .models import (
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
    DomainRegistrationStatusExternalDomain,
    DomainRegistrationStatusTransfer,
    Money,
    Tld,
    TldOffer,
)


def flatten_domain(record: Domain) -> dict:
    """
    Flatten a domain record into the full resource state.

    Args:
        record: Domain as returned by the registrar

    Returns:
        Flat state map; keys for absent substructures are omitted
    """
    state = {
        "domain_name": record.domain,
        "organization_id": record.organization_id,
        "project_id": record.project_id,
        "auto_renew_status": record.auto_renew_status.value,
        "epp_code": list(record.epp_code),
        "registrar": record.registrar,
        "is_external": record.is_external,
        "status": record.status.value,
        "pending_trade": record.pending_trade,
        "linked_products": list(record.linked_products),
    }

    if record.expired_at is not None:
        state["expired_at"] = format_rfc3339(record.expired_at)
    if record.updated_at is not None:
        state["updated_at"] = format_rfc3339(record.updated_at)
    if record.dnssec is not None:
        state["dnssec_status"] = record.dnssec.status.value

    _set_if_present(state, "owner_contact", flatten_contact(record.owner_contact))
    _set_if_present(state, "administrative_contact", flatten_contact(record.administrative_contact))
    _set_if_present(state, "technical_contact", flatten_contact(record.technical_contact))
    _set_if_present(state, "tld", flatten_tld(record.tld))
    _set_if_present(state, "dns_zones", flatten_dns_zones(record.dns_zones))
    _set_if_present(
        state,
        "transfer_registration_status",
        flatten_domain_registration_status_transfer(record.transfer_registration_status),
    )
    _set_if_present(
        state,
        "external_domain_registration_status",
        flatten_external_domain_registration_status(record.external_domain_registration_status),
    )

    return state


def _set_if_present(target: dict, key: str, value) -> None:
    if value is not None:
        target[key] = value


# ============================================================================
# CONTACTS
# ============================================================================

def flatten_contact(contact: Optional[Contact]) -> Optional[dict]:
    """Flatten a resolved contact. The registrar-assigned ID is not part of state."""
    if contact is None:
        return None

    flattened = {
        "phone_number": contact.phone_number,
        "legal_form": contact.legal_form.value,
        "firstname": contact.firstname,
        "lastname": contact.lastname,
        "email": contact.email,
        "address_line_1": contact.address_line_1,
        "zip": contact.zip,
        "city": contact.city,
        "country": contact.country,
        "company_name": contact.company_name,
        "email_alt": contact.email_alt,
        "fax_number": contact.fax_number,
        "address_line_2": contact.address_line_2,
        "vat_identification_code": contact.vat_identification_code,
        "company_identification_code": contact.company_identification_code,
        "lang": contact.lang,
        "resale": contact.resale,
        "state": contact.state,
        "whois_opt_in": contact.whois_opt_in,
    }

    _set_if_present(flattened, "extension_fr", flatten_contact_extension_fr(contact.extension_fr))
    _set_if_present(flattened, "extension_eu", flatten_contact_extension_eu(contact.extension_eu))
    _set_if_present(flattened, "extension_nl", flatten_contact_extension_nl(contact.extension_nl))

    return flattened


def flatten_contact_extension_fr(ext: Optional[ContactExtensionFR]) -> Optional[dict]:
    if ext is None:
        return None

    flattened = {"mode": ext.mode.value}
    _set_if_present(flattened, "individual_info", flatten_fr_individual_info(ext.individual_info))
    _set_if_present(flattened, "duns_info", flatten_fr_duns_info(ext.duns_info))
    _set_if_present(flattened, "association_info", flatten_fr_association_info(ext.association_info))
    _set_if_present(flattened, "trademark_info", flatten_fr_trademark_info(ext.trademark_info))
    _set_if_present(
        flattened,
        "code_auth_afnic_info",
        flatten_fr_code_auth_afnic_info(ext.code_auth_afnic_info),
    )
    return flattened


def flatten_fr_individual_info(info: Optional[ContactExtensionFRIndividualInfo]) -> Optional[dict]:
    if info is None:
        return None
    return {"whois_opt_in": info.whois_opt_in}


def flatten_fr_duns_info(info: Optional[ContactExtensionFRDunsInfo]) -> Optional[dict]:
    if info is None:
        return None
    return {"duns_id": info.duns_id, "local_id": info.local_id}


def flatten_fr_association_info(
    info: Optional[ContactExtensionFRAssociationInfo],
) -> Optional[dict]:
    if info is None:
        return None
    flattened = {"publication_jo_page": info.publication_jo_page}
    if info.publication_jo is not None:
        flattened["publication_jo"] = format_rfc3339(info.publication_jo)
    return flattened


def flatten_fr_trademark_info(info: Optional[ContactExtensionFRTrademarkInfo]) -> Optional[dict]:
    if info is None:
        return None
    return {"trademark_inpi": info.trademark_inpi}


def flatten_fr_code_auth_afnic_info(
    info: Optional[ContactExtensionFRCodeAuthAfnicInfo],
) -> Optional[dict]:
    if info is None:
        return None
    return {"code_auth_afnic": info.code_auth_afnic}


def flatten_contact_extension_eu(ext: Optional[ContactExtensionEU]) -> Optional[dict]:
    if ext is None:
        return None
    return {"european_citizenship": ext.european_citizenship}


def flatten_contact_extension_nl(ext: Optional[ContactExtensionNL]) -> Optional[dict]:
    if ext is None:
        return None
    return {
        "legal_form": ext.legal_form.value,
        "legal_form_registration_number": ext.legal_form_registration_number,
    }


# ============================================================================
# TLD
# ============================================================================

def flatten_tld(tld: Optional[Tld]) -> Optional[dict]:
    if tld is None:
        return None

    flattened = {
        "name": tld.name,
        "dnssec_support": tld.dnssec_support,
        "duration_in_years_min": tld.duration_in_years_min,
        "duration_in_years_max": tld.duration_in_years_max,
        "idn_support": tld.idn_support,
    }
    _set_if_present(flattened, "offers", flatten_tld_offers(tld.offers))
    if tld.specifications is not None:
        flattened["specifications"] = dict(tld.specifications)
    return flattened


def flatten_tld_offers(offers: Optional[dict[str, TldOffer]]) -> Optional[dict]:
    if offers is None:
        return None

    flattened = {}
    for name, offer in offers.items():
        entry = {
            "action": offer.action,
            "operation_path": offer.operation_path,
        }
        _set_if_present(entry, "price", _flatten_money(offer.price))
        flattened[name] = entry
    return flattened


def _flatten_money(price: Optional[Money]) -> Optional[dict]:
    if price is None:
        return None
    return {
        "currency_code": price.currency_code,
        "units": price.units,
        "nanos": price.nanos,
    }


# ============================================================================
# DNS ZONES AND REGISTRATION STATUS
# ============================================================================

def flatten_dns_zones(dns_zones: Optional[list[DNSZone]]) -> Optional[list[dict]]:
    """Flatten DNS zones, preserving their order."""
    if dns_zones is None:
        return None

    zones = []
    for zone in dns_zones:
        entry = {
            "domain": zone.domain,
            "subdomain": zone.subdomain,
            "ns": list(zone.ns),
            "ns_default": list(zone.ns_default),
            "ns_master": list(zone.ns_master),
            "status": zone.status.value,
            "project_id": zone.project_id,
        }
        _set_if_present(entry, "message", zone.message)
        if zone.updated_at is not None:
            entry["updated_at"] = format_rfc3339(zone.updated_at)
        zones.append(entry)
    return zones


def flatten_domain_registration_status_transfer(
    transfer_status: Optional[DomainRegistrationStatusTransfer],
) -> Optional[dict]:
    if transfer_status is None:
        return None
    return {
        "status": transfer_status.status.value,
        "vote_current_owner": transfer_status.vote_current_owner,
        "vote_new_owner": transfer_status.vote_new_owner,
    }


def flatten_external_domain_registration_status(
    status: Optional[DomainRegistrationStatusExternalDomain],
) -> Optional[dict]:
    if status is None:
        return None
    return {"validation_token": status.validation_token}
