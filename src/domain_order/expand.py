"""
Expand flat resource configuration into registrar request objects.

The configuration map is what the infrastructure host hands over: string
keys mapping to strings, ints, bools, nested maps and lists. Expansion is
total. Missing or wrong-typed values degrade to zero values or are left
unset, and the registrar is relied upon to validate them.
"""

from typing import Optional

from .coercion import (
    get_bool,
    get_float,
    get_int,
    get_map,
    get_non_empty_string,
    get_optional_string,
    get_string,
    parse_rfc3339,
    to_uint32,
)
from .enums import ContactExtensionFRMode, ContactExtensionNLLegalForm, ContactLegalForm
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
    NewContact,
)

DEFAULT_DURATION_IN_YEARS = 1

CONTACT_ROLES = ("owner", "administrative", "technical")

# Optional NewContact scalars, forwarded whenever the key holds a string
NEW_CONTACT_OPTIONAL_FIELDS = (
    "company_name",
    "email_alt",
    "fax_number",
    "address_line_2",
    "vat_identification_code",
    "company_identification_code",
    "state",
)


def expand_buy_domains_request(config: dict) -> BuyDomainsRequest:
    """
    Build the buy-domains order for a single domain.

    For each contact role a non-empty ``<role>_contact_id`` wins over an
    inline ``<role>_contact`` map; when neither is set the role is left out
    and the registrar falls back to the owner.

    Args:
        config: Flat resource configuration

    Returns:
        BuyDomainsRequest ready to send
    """
    request = BuyDomainsRequest(
        domains=[get_string(config, "domain_name")],
        duration_in_years=get_int(config, "duration_in_years", DEFAULT_DURATION_IN_YEARS),
        project_id=get_string(config, "project_id"),
    )

    for role in CONTACT_ROLES:
        contact_id = get_non_empty_string(config, f"{role}_contact_id")
        if contact_id is not None:
            setattr(request, f"{role}_contact_id", contact_id)
            continue

        contact_map = get_map(config, f"{role}_contact")
        if contact_map:
            setattr(request, f"{role}_contact", expand_new_contact(contact_map))

    return request


def expand_new_contact(contact_map: Optional[dict]) -> Optional[NewContact]:
    """
    Expand an inline contact map into a new-contact payload.

    Required fields are read unconditionally. Optional scalars are attached
    whenever their key exists, so an explicit ``""`` is forwarded while a
    missing key leaves the field unset.
    """
    if contact_map is None:
        return None

    contact = NewContact(
        phone_number=get_string(contact_map, "phone_number"),
        legal_form=ContactLegalForm.parse(contact_map.get("legal_form")),
        firstname=get_string(contact_map, "firstname"),
        lastname=get_string(contact_map, "lastname"),
        email=get_string(contact_map, "email"),
        address_line_1=get_string(contact_map, "address_line_1"),
        zip=get_string(contact_map, "zip"),
        city=get_string(contact_map, "city"),
        country=get_string(contact_map, "country"),
        resale=get_bool(contact_map, "resale"),
        whois_opt_in=get_bool(contact_map, "whois_opt_in"),
        lang=get_non_empty_string(contact_map, "lang"),
    )

    for name in NEW_CONTACT_OPTIONAL_FIELDS:
        setattr(contact, name, get_optional_string(contact_map, name))

    _expand_extensions(contact, contact_map)

    return contact


def expand_contact(contact_map: Optional[dict]) -> Optional[Contact]:
    """
    Expand a contact map into a full contact.

    Unlike ``expand_new_contact``, optional scalars are only copied when
    non-empty since the full contact has no notion of "unset".
    """
    if contact_map is None:
        return None

    contact = Contact(
        phone_number=get_string(contact_map, "phone_number"),
        legal_form=ContactLegalForm.parse(contact_map.get("legal_form")),
        firstname=get_string(contact_map, "firstname"),
        lastname=get_string(contact_map, "lastname"),
        email=get_string(contact_map, "email"),
        address_line_1=get_string(contact_map, "address_line_1"),
        zip=get_string(contact_map, "zip"),
        city=get_string(contact_map, "city"),
        country=get_string(contact_map, "country"),
        resale=get_bool(contact_map, "resale"),
        whois_opt_in=get_bool(contact_map, "whois_opt_in"),
    )

    for name in NEW_CONTACT_OPTIONAL_FIELDS + ("lang",):
        value = get_non_empty_string(contact_map, name)
        if value is not None:
            setattr(contact, name, value)

    _expand_extensions(contact, contact_map)

    return contact


def _expand_extensions(contact, contact_map: dict) -> None:
    ext_fr = get_map(contact_map, "extension_fr")
    if ext_fr:
        contact.extension_fr = expand_contact_extension_fr(ext_fr)

    ext_eu = get_map(contact_map, "extension_eu")
    if ext_eu:
        contact.extension_eu = expand_contact_extension_eu(ext_eu)

    ext_nl = get_map(contact_map, "extension_nl")
    if ext_nl:
        contact.extension_nl = expand_contact_extension_nl(ext_nl)


# ============================================================================
# CONTACT EXTENSIONS
# ============================================================================

def expand_contact_extension_fr(extension_map: Optional[dict]) -> Optional[ContactExtensionFR]:
    """
    Expand the French extension.

    ``mode`` defaults to MODE_UNKNOWN. Each info block is built only when
    its nested map is present.
    """
    if not extension_map:
        return None

    return ContactExtensionFR(
        mode=ContactExtensionFRMode.parse(extension_map.get("mode")),
        individual_info=expand_fr_individual_info(get_map(extension_map, "individual_info")),
        duns_info=expand_fr_duns_info(get_map(extension_map, "duns_info")),
        association_info=expand_fr_association_info(get_map(extension_map, "association_info")),
        trademark_info=expand_fr_trademark_info(get_map(extension_map, "trademark_info")),
        code_auth_afnic_info=expand_fr_code_auth_afnic_info(
            get_map(extension_map, "code_auth_afnic_info")
        ),
    )


def expand_contact_extension_eu(extension_map: Optional[dict]) -> Optional[ContactExtensionEU]:
    if not extension_map:
        return None
    return ContactExtensionEU(
        european_citizenship=get_string(extension_map, "european_citizenship"),
    )


def expand_contact_extension_nl(extension_map: Optional[dict]) -> Optional[ContactExtensionNL]:
    if not extension_map:
        return None
    return ContactExtensionNL(
        legal_form=ContactExtensionNLLegalForm.parse(extension_map.get("legal_form")),
        legal_form_registration_number=get_string(
            extension_map, "legal_form_registration_number"
        ),
    )


def expand_fr_individual_info(data: Optional[dict]) -> Optional[ContactExtensionFRIndividualInfo]:
    if data is None:
        return None
    return ContactExtensionFRIndividualInfo(whois_opt_in=get_bool(data, "whois_opt_in"))


def expand_fr_duns_info(data: Optional[dict]) -> Optional[ContactExtensionFRDunsInfo]:
    if data is None:
        return None
    return ContactExtensionFRDunsInfo(
        duns_id=get_string(data, "duns_id"),
        local_id=get_string(data, "local_id"),
    )


def expand_fr_association_info(data: Optional[dict]) -> Optional[ContactExtensionFRAssociationInfo]:
    """
    Expand Journal Officiel publication details.

    ``publication_jo`` must be RFC 3339; anything else leaves it unset.
    ``publication_jo_page`` is only read from a float and truncated.
    """
    if data is None:
        return None

    info = ContactExtensionFRAssociationInfo(
        publication_jo=parse_rfc3339(data.get("publication_jo")),
    )
    page = get_float(data, "publication_jo_page")
    if page is not None:
        info.publication_jo_page = to_uint32(page)
    return info


def expand_fr_trademark_info(data: Optional[dict]) -> Optional[ContactExtensionFRTrademarkInfo]:
    if data is None:
        return None
    return ContactExtensionFRTrademarkInfo(trademark_inpi=get_string(data, "trademark_inpi"))


def expand_fr_code_auth_afnic_info(
    data: Optional[dict],
) -> Optional[ContactExtensionFRCodeAuthAfnicInfo]:
    if data is None:
        return None
    return ContactExtensionFRCodeAuthAfnicInfo(code_auth_afnic=get_string(data, "code_auth_afnic"))
