"""
DNS record lookup helpers.

Used to re-locate a record inside a zone from its type and data, since the
registrar does not echo record IDs back on every response.
"""

from typing import Union

from .enums import RecordType
from .exceptions import DuplicateRecordMatch, RecordNotFound
from .models import Record

REVERSE_DNS_SUFFIX = ".instances.scw.cloud"


def flatten_domain_data(data: str, record_type: Union[RecordType, str]) -> str:
    """
    Normalize record data to the form users write in configuration.

    MX data comes back as ``"{priority} {data}"`` and loses the priority;
    TXT data loses its surrounding quotes.
    """
    record_type = RecordType.parse(record_type) if isinstance(record_type, str) else record_type

    if record_type == RecordType.MX:
        parts = data.split(" ", 1)
        if len(parts) == 2:
            return parts[1]
    elif record_type == RecordType.TXT:
        return data.strip('"')
    return data


def get_record_from_type_and_data(
    record_type: RecordType,
    data: str,
    records: list[Record],
) -> Record:
    """
    Find the single record of the given type whose data starts with ``data``.

    Comparison is case-insensitive and done on normalized data.

    Raises:
        DuplicateRecordMatch: If more than one record matches
        RecordNotFound: If no record matches
    """
    wanted = flatten_domain_data(data.lower(), record_type)

    matches = [
        record
        for record in records
        if record.type == record_type
        and flatten_domain_data(record.data.lower(), record.type).startswith(wanted)
    ]

    if len(matches) > 1:
        raise DuplicateRecordMatch(
            message="multiple records found with same type and data",
            details={
                "type": record_type.value,
                "data": data,
                "record_ids": [record.id for record in matches],
            },
        )

    if not matches:
        raise RecordNotFound(
            message=f"record with type {record_type.value} and data {data} not found",
            details={"type": record_type.value, "data": data},
        )

    return matches[0]


def find_default_reverse(address: str) -> str:
    """
    Build the default reverse hostname of an instance IPv4 address.

    ``1.2.3.4`` becomes ``4-3-2-1.instances.scw.cloud``.
    """
    parts = address.split(".")
    return "-".join(reversed(parts)) + REVERSE_DNS_SUFFIX
