"""
Domain Order - registrar domain orders as declarative resources.

This package maps flat resource configuration to registrar buy-domain
orders and maps registrar domain records back to flat resource state,
with the ``project_id/domain_name`` identity used to re-locate them.
"""

__version__ = "0.1.0"
__author__ = "Domain Order Team"

from domain_order.exceptions import (
    DomainOrderError,
    ConfigurationError,
    InvalidIdentifier,
    DuplicateRecordMatch,
    RecordNotFound,
    RegistrarAPIError,
)
from domain_order.enums import (
    ContactLegalForm,
    ContactExtensionFRMode,
    ContactExtensionNLLegalForm,
    DomainStatus,
    DomainFeatureStatus,
    DomainRegistrationStatusTransferStatus,
    DNSZoneStatus,
    RecordType,
    LogLevel,
    ErrorCode,
)
from domain_order.models import (
    ContactExtensionFRIndividualInfo,
    ContactExtensionFRDunsInfo,
    ContactExtensionFRAssociationInfo,
    ContactExtensionFRTrademarkInfo,
    ContactExtensionFRCodeAuthAfnicInfo,
    ContactExtensionFR,
    ContactExtensionEU,
    ContactExtensionNL,
    Contact,
    NewContact,
    BuyDomainsRequest,
    GetDomainRequest,
    Money,
    TldOffer,
    Tld,
    DNSZone,
    DomainDNSSEC,
    DomainRegistrationStatusTransfer,
    DomainRegistrationStatusExternalDomain,
    Domain,
    Record,
)
from domain_order.config import (
    RegistrarConfig,
    LoggingConfig,
    SystemConfig,
    create_default_config,
    load_config_from_file,
    load_config_from_env,
    save_config_to_file,
)
from domain_order.expand import (
    expand_buy_domains_request,
    expand_new_contact,
    expand_contact,
    expand_contact_extension_fr,
    expand_contact_extension_eu,
    expand_contact_extension_nl,
)
from domain_order.flatten import (
    flatten_domain,
    flatten_contact,
    flatten_contact_extension_fr,
    flatten_contact_extension_eu,
    flatten_contact_extension_nl,
    flatten_tld,
    flatten_tld_offers,
    flatten_dns_zones,
    flatten_domain_registration_status_transfer,
    flatten_external_domain_registration_status,
)
from domain_order.identity import (
    encode_id,
    decode_id,
)
from domain_order.validation import (
    ResourceDiff,
    validate_owner_contact,
)
from domain_order.records import (
    flatten_domain_data,
    get_record_from_type_and_data,
    find_default_reverse,
)
from domain_order.audit_logger import (
    AuditLogger,
    LogEntry,
)
from domain_order.registrar_client import (
    RegistrarClient,
)
from domain_order.resource import (
    OrderDomainResource,
    ResourceState,
)
from domain_order.cli import (
    main as cli_main,
    create_parser,
)

__all__ = [
    # Exceptions
    "DomainOrderError",
    "ConfigurationError",
    "InvalidIdentifier",
    "DuplicateRecordMatch",
    "RecordNotFound",
    "RegistrarAPIError",
    # Enums
    "ContactLegalForm",
    "ContactExtensionFRMode",
    "ContactExtensionNLLegalForm",
    "DomainStatus",
    "DomainFeatureStatus",
    "DomainRegistrationStatusTransferStatus",
    "DNSZoneStatus",
    "RecordType",
    "LogLevel",
    "ErrorCode",
    # Models
    "ContactExtensionFRIndividualInfo",
    "ContactExtensionFRDunsInfo",
    "ContactExtensionFRAssociationInfo",
    "ContactExtensionFRTrademarkInfo",
    "ContactExtensionFRCodeAuthAfnicInfo",
    "ContactExtensionFR",
    "ContactExtensionEU",
    "ContactExtensionNL",
    "Contact",
    "NewContact",
    "BuyDomainsRequest",
    "GetDomainRequest",
    "Money",
    "TldOffer",
    "Tld",
    "DNSZone",
    "DomainDNSSEC",
    "DomainRegistrationStatusTransfer",
    "DomainRegistrationStatusExternalDomain",
    "Domain",
    "Record",
    # Configuration
    "RegistrarConfig",
    "LoggingConfig",
    "SystemConfig",
    "create_default_config",
    "load_config_from_file",
    "load_config_from_env",
    "save_config_to_file",
    # Expand
    "expand_buy_domains_request",
    "expand_new_contact",
    "expand_contact",
    "expand_contact_extension_fr",
    "expand_contact_extension_eu",
    "expand_contact_extension_nl",
    # Flatten
    "flatten_domain",
    "flatten_contact",
    "flatten_contact_extension_fr",
    "flatten_contact_extension_eu",
    "flatten_contact_extension_nl",
    "flatten_tld",
    "flatten_tld_offers",
    "flatten_dns_zones",
    "flatten_domain_registration_status_transfer",
    "flatten_external_domain_registration_status",
    # Identity
    "encode_id",
    "decode_id",
    # Validation
    "ResourceDiff",
    "validate_owner_contact",
    # DNS records
    "flatten_domain_data",
    "get_record_from_type_and_data",
    "find_default_reverse",
    # Audit Logger
    "AuditLogger",
    "LogEntry",
    # Registrar Client
    "RegistrarClient",
    # Resource
    "OrderDomainResource",
    "ResourceState",
    # CLI
    "cli_main",
    "create_parser",
]
