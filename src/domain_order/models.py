"""
Data models for the domain order adapter.

This module defines the registrar request and response structures:
contacts and their jurisdiction extensions, the buy-domains order,
and the domain record returned on read with its TLD metadata, DNS
zones and registration status substructures.

``None`` always means "absent". A present-but-empty value (``""``, ``0``,
``[]``) is a distinct state and is kept as such.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from .enums import (
    ContactExtensionFRMode,
    ContactExtensionNLLegalForm,
    ContactLegalForm,
    DNSZoneStatus,
    DomainFeatureStatus,
    DomainRegistrationStatusTransferStatus,
    DomainStatus,
    RecordType,
)


# ============================================================================
# CONTACT EXTENSIONS
# ============================================================================

@dataclass
class ContactExtensionFRIndividualInfo:
    """WHOIS opt-in of an individual .fr registrant."""

    whois_opt_in: bool = False


@dataclass
class ContactExtensionFRDunsInfo:
    """DUNS and local identifiers of a .fr company registrant."""

    duns_id: str = ""
    local_id: str = ""


@dataclass
class ContactExtensionFRAssociationInfo:
    """Publication of a French association in the Journal Officiel."""

    publication_jo: Optional[datetime] = None
    publication_jo_page: int = 0


@dataclass
class ContactExtensionFRTrademarkInfo:
    """INPI trademark registration number."""

    trademark_inpi: str = ""


@dataclass
class ContactExtensionFRCodeAuthAfnicInfo:
    """AFNIC authorization code."""

    code_auth_afnic: str = ""


@dataclass
class ContactExtensionFR:
    """French contact extension. Info blocks are independently optional."""

    mode: ContactExtensionFRMode = ContactExtensionFRMode.MODE_UNKNOWN
    individual_info: Optional[ContactExtensionFRIndividualInfo] = None
    duns_info: Optional[ContactExtensionFRDunsInfo] = None
    association_info: Optional[ContactExtensionFRAssociationInfo] = None
    trademark_info: Optional[ContactExtensionFRTrademarkInfo] = None
    code_auth_afnic_info: Optional[ContactExtensionFRCodeAuthAfnicInfo] = None


@dataclass
class ContactExtensionEU:
    """European Union contact extension."""

    european_citizenship: str = ""


@dataclass
class ContactExtensionNL:
    """Dutch contact extension."""

    legal_form: ContactExtensionNLLegalForm = ContactExtensionNLLegalForm.LEGAL_FORM_UNKNOWN
    legal_form_registration_number: str = ""


# ============================================================================
# CONTACTS
# ============================================================================

@dataclass
class Contact:
    """A contact as resolved by the registrar."""

    id: str = ""
    legal_form: ContactLegalForm = ContactLegalForm.LEGAL_FORM_UNKNOWN
    firstname: str = ""
    lastname: str = ""
    company_name: str = ""
    email: str = ""
    email_alt: str = ""
    phone_number: str = ""
    fax_number: str = ""
    address_line_1: str = ""
    address_line_2: str = ""
    zip: str = ""
    city: str = ""
    country: str = ""
    vat_identification_code: str = ""
    company_identification_code: str = ""
    lang: str = ""
    resale: bool = False
    whois_opt_in: bool = False
    state: str = ""
    extension_fr: Optional[ContactExtensionFR] = None
    extension_eu: Optional[ContactExtensionEU] = None
    extension_nl: Optional[ContactExtensionNL] = None


@dataclass
class NewContact:
    """
    Inline contact payload sent with an order.

    Optional scalars are ``None`` when the configuration never set them and
    ``""`` when it set them explicitly to empty.
    """

    legal_form: ContactLegalForm = ContactLegalForm.LEGAL_FORM_UNKNOWN
    firstname: str = ""
    lastname: str = ""
    email: str = ""
    phone_number: str = ""
    address_line_1: str = ""
    zip: str = ""
    city: str = ""
    country: str = ""
    company_name: Optional[str] = None
    email_alt: Optional[str] = None
    fax_number: Optional[str] = None
    address_line_2: Optional[str] = None
    vat_identification_code: Optional[str] = None
    company_identification_code: Optional[str] = None
    lang: Optional[str] = None
    state: Optional[str] = None
    resale: bool = False
    whois_opt_in: bool = False
    extension_fr: Optional[ContactExtensionFR] = None
    extension_eu: Optional[ContactExtensionEU] = None
    extension_nl: Optional[ContactExtensionNL] = None


# ============================================================================
# REQUESTS
# ============================================================================

@dataclass
class BuyDomainsRequest:
    """Order for one or more domains. At most one of ID/payload is set per role."""

    domains: list[str]
    duration_in_years: int
    project_id: str
    owner_contact_id: Optional[str] = None
    owner_contact: Optional[NewContact] = None
    administrative_contact_id: Optional[str] = None
    administrative_contact: Optional[NewContact] = None
    technical_contact_id: Optional[str] = None
    technical_contact: Optional[NewContact] = None


@dataclass
class GetDomainRequest:
    """Lookup of a single registered domain."""

    domain: str


# ============================================================================
# DOMAIN RECORD
# ============================================================================

@dataclass
class Money:
    """Price as currency code, integer units and fractional nanos."""

    currency_code: str = ""
    units: int = 0
    nanos: int = 0


@dataclass
class TldOffer:
    """A priced operation offered for a TLD."""

    action: str = ""
    operation_path: str = ""
    price: Optional[Money] = None


@dataclass
class Tld:
    """TLD metadata and registration constraints."""

    name: str = ""
    dnssec_support: bool = False
    duration_in_years_min: int = 0
    duration_in_years_max: int = 0
    idn_support: bool = False
    offers: Optional[dict[str, TldOffer]] = None
    specifications: Optional[dict[str, str]] = None


@dataclass
class DNSZone:
    """A DNS zone attached to a domain."""

    domain: str = ""
    subdomain: str = ""
    ns: list[str] = field(default_factory=list)
    ns_default: list[str] = field(default_factory=list)
    ns_master: list[str] = field(default_factory=list)
    status: DNSZoneStatus = DNSZoneStatus.UNKNOWN
    message: Optional[str] = None
    updated_at: Optional[datetime] = None
    project_id: str = ""


@dataclass
class DomainDNSSEC:
    """DNSSEC state of a domain."""

    status: DomainFeatureStatus = DomainFeatureStatus.FEATURE_STATUS_UNKNOWN


@dataclass
class DomainRegistrationStatusTransfer:
    """Inbound transfer in progress."""

    status: DomainRegistrationStatusTransferStatus = (
        DomainRegistrationStatusTransferStatus.STATUS_UNKNOWN
    )
    vote_current_owner: bool = False
    vote_new_owner: bool = False


@dataclass
class DomainRegistrationStatusExternalDomain:
    """Domain registered with another registrar."""

    validation_token: str = ""


@dataclass
class Domain:
    """A domain record as returned by the registrar."""

    domain: str = ""
    organization_id: str = ""
    project_id: str = ""
    auto_renew_status: DomainFeatureStatus = DomainFeatureStatus.FEATURE_STATUS_UNKNOWN
    dnssec: Optional[DomainDNSSEC] = None
    epp_code: list[str] = field(default_factory=list)
    expired_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    registrar: str = ""
    is_external: bool = False
    status: DomainStatus = DomainStatus.STATUS_UNKNOWN
    dns_zones: Optional[list[DNSZone]] = None
    owner_contact: Optional[Contact] = None
    technical_contact: Optional[Contact] = None
    administrative_contact: Optional[Contact] = None
    external_domain_registration_status: Optional[DomainRegistrationStatusExternalDomain] = None
    transfer_registration_status: Optional[DomainRegistrationStatusTransfer] = None
    tld: Optional[Tld] = None
    linked_products: list[str] = field(default_factory=list)
    pending_trade: bool = False


# ============================================================================
# DNS RECORDS
# ============================================================================

@dataclass
class Record:
    """A DNS record inside a zone."""

    id: str = ""
    name: str = ""
    type: RecordType = RecordType.UNKNOWN
    data: str = ""
    ttl: int = 0
    priority: int = 0
    comment: Optional[str] = None
