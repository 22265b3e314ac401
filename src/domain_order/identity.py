"""
Resource identifiers of the form ``{project_id}/{domain_name}``.

No escaping is applied: a ``/`` inside either part produces an identifier
that ``decode_id`` rejects.
"""

from .exceptions import InvalidIdentifier

ID_SEPARATOR = "/"


def encode_id(project_id: str, domain_name: str) -> str:
    return f"{project_id}{ID_SEPARATOR}{domain_name}"


def decode_id(resource_id: str) -> str:
    """
    Extract the domain name from a resource identifier.

    Args:
        resource_id: Identifier minted by ``encode_id``

    Returns:
        The domain name segment

    Raises:
        InvalidIdentifier: If the identifier is not exactly two segments
    """
    parts = resource_id.split(ID_SEPARATOR)
    if len(parts) != 2:
        raise InvalidIdentifier(
            message=(
                "invalid ID format, expected 'projectID/domainName', "
                f"got: {resource_id}"
            ),
            details={"resource_id": resource_id, "segments": len(parts)},
        )
    return parts[1]
