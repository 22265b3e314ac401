"""
Enumeration types for the domain order adapter.

Every enum carries an explicit unknown member. Values coming from user
configuration or from the registrar are coerced with ``parse`` so that an
unrecognised tag lands on that member instead of raising.
"""

from enum import Enum
from typing import Any, Optional, TypeVar

E = TypeVar("E", bound="RegistrarEnum")


class RegistrarEnum(Enum):
    """Base for string-tagged registrar enums."""

    @classmethod
    def default(cls: type[E]) -> E:
        """Return the documented default (unknown) member."""
        return next(iter(cls))

    @classmethod
    def parse(cls: type[E], value: Any, default: Optional[E] = None) -> E:
        """
        Coerce a raw tag to a member.

        Non-string input and unknown tags fall back to ``default`` (or the
        enum's unknown member).
        """
        fallback = default if default is not None else cls.default()
        if not isinstance(value, str):
            return fallback
        try:
            return cls(value)
        except ValueError:
            return fallback

    def __str__(self) -> str:
        return self.value


class ContactLegalForm(RegistrarEnum):
    """Legal form of a registrant."""

    LEGAL_FORM_UNKNOWN = "legal_form_unknown"
    INDIVIDUAL = "individual"
    CORPORATE = "corporate"
    ASSOCIATION = "association"
    OTHER = "other"


class ContactExtensionFRMode(RegistrarEnum):
    """Disclosure mode of the French (AFNIC) contact extension."""

    MODE_UNKNOWN = "mode_unknown"
    INDIVIDUAL = "individual"
    COMPANY_IDENTIFICATION_CODE = "company_identification_code"
    DUNS = "duns"
    LOCAL = "local"
    ASSOCIATION = "association"
    TRADEMARK = "trademark"
    CODE_AUTH_AFNIC = "code_auth_afnic"


class ContactExtensionNLLegalForm(RegistrarEnum):
    """Dutch (SIDN) legal forms."""

    LEGAL_FORM_UNKNOWN = "legal_form_unknown"
    NON_DUTCH_EU_COMPANY = "non_dutch_eu_company"
    NON_DUTCH_LEGAL_FORM_ENTERPRISE_SUBSIDIARY = "non_dutch_legal_form_enterprise_subsidiary"
    LIMITED_COMPANY = "limited_company"
    LIMITED_COMPANY_IN_FORMATION = "limited_company_in_formation"
    COOPERATIVE = "cooperative"
    LIMITED_PARTNERSHIP = "limited_partnership"
    SOLE_COMPANY = "sole_company"
    EUROPEAN_ECONOMIC_INTEREST_GROUP = "european_economic_interest_group"
    RELIGIOUS_ENTITY = "religious_entity"
    PARTNERSHIP = "partnership"
    PUBLIC_COMPANY = "public_company"
    MUTUAL_BENEFIT_COMPANY = "mutual_benefit_company"
    RESIDENTIAL = "residential"
    SHIPPING_COMPANY = "shipping_company"
    FOUNDATION = "foundation"
    ASSOCIATION = "association"
    TRADING_PARTNERSHIP = "trading_partnership"
    NATURAL_PERSON = "natural_person"


class DomainStatus(RegistrarEnum):
    """Overall status of a registered domain."""

    STATUS_UNKNOWN = "status_unknown"
    ACTIVE = "active"
    CREATING = "creating"
    CREATE_ERROR = "create_error"
    RENEWING = "renewing"
    RENEW_ERROR = "renew_error"
    XFERING = "xfering"
    XFER_ERROR = "xfer_error"
    EXPIRED = "expired"
    EXPIRING = "expiring"
    UPDATING = "updating"
    CHECKING = "checking"
    LOCKED = "locked"
    DELETING = "deleting"


class DomainFeatureStatus(RegistrarEnum):
    """Status of an optional domain feature (auto-renew, DNSSEC)."""

    FEATURE_STATUS_UNKNOWN = "feature_status_unknown"
    ENABLING = "enabling"
    ENABLED = "enabled"
    DISABLING = "disabling"
    DISABLED = "disabled"


class DomainRegistrationStatusTransferStatus(RegistrarEnum):
    """Progress of an inbound transfer."""

    STATUS_UNKNOWN = "status_unknown"
    PENDING = "pending"
    WAITING_VOTE = "waiting_vote"
    REJECTED = "rejected"
    PROCESSING = "processing"
    DONE = "done"


class DNSZoneStatus(RegistrarEnum):
    """Status of a DNS zone attached to a domain."""

    UNKNOWN = "unknown"
    ACTIVE = "active"
    PENDING = "pending"
    ERROR = "error"
    LOCKED = "locked"


class RecordType(RegistrarEnum):
    """DNS record types handled by the record lookup helpers."""

    UNKNOWN = "unknown"
    A = "A"
    AAAA = "AAAA"
    CNAME = "CNAME"
    TXT = "TXT"
    SRV = "SRV"
    TLSA = "TLSA"
    MX = "MX"
    NS = "NS"
    PTR = "PTR"
    CAA = "CAA"
    ALIAS = "ALIAS"
    LOC = "LOC"
    SSHFP = "SSHFP"
    HINFO = "HINFO"
    RP = "RP"
    URI = "URI"
    DS = "DS"
    NAPTR = "NAPTR"
    DNAME = "DNAME"


class LogLevel(Enum):
    """Logging severity levels, ordered by rank."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"

    @property
    def rank(self) -> int:
        return list(LogLevel).index(self)


class ErrorCode(Enum):
    """Error codes carried by ``DomainOrderError`` subclasses."""

    CONFIGURATION_ERROR = "configuration_error"
    INVALID_IDENTIFIER = "invalid_identifier"
    DUPLICATE_RECORD_MATCH = "duplicate_record_match"
    RECORD_NOT_FOUND = "record_not_found"
    API_ERROR = "api_error"
    NETWORK_ERROR = "network_error"
    TIMEOUT = "timeout"
    PARSE_ERROR = "parse_error"
