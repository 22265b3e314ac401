"""
Plan-time validation of pending resource configuration.

The host computes a ``ResourceDiff`` between the prior state and the new
configuration; validators run on it before any registrar call is made.
"""

from dataclasses import dataclass, field
from typing import Any

from .exceptions import ConfigurationError

_MISSING = object()


@dataclass
class ResourceDiff:
    """Prior and pending configuration of a single resource."""

    old: dict = field(default_factory=dict)
    new: dict = field(default_factory=dict)

    @classmethod
    def for_create(cls, config: dict) -> "ResourceDiff":
        """Diff of a resource that does not exist yet: every set key changes."""
        return cls(old={}, new=dict(config))

    def get(self, key: str, default: Any = None) -> Any:
        return self.new.get(key, default)

    def has_change(self, key: str) -> bool:
        """True when the key's pending value differs from its prior value."""
        old_value = self.old.get(key, _MISSING)
        new_value = self.new.get(key, _MISSING)
        if old_value is _MISSING and new_value is _MISSING:
            return False
        # An unset key and its zero value are the same to the host
        return _normalize(old_value) != _normalize(new_value)


def _normalize(value: Any) -> Any:
    if value is _MISSING or value is None:
        return None
    if value in ("", {}, []):
        return None
    return value


def validate_owner_contact(diff: ResourceDiff) -> None:
    """
    Require exactly one owner contact form among the changed values.

    Raises:
        ConfigurationError: If both or neither of ``owner_contact_id`` and
            ``owner_contact`` are supplied
    """
    owner_contact_id = diff.get("owner_contact_id")
    owner_contact = diff.get("owner_contact")

    has_owner_contact_id = (
        diff.has_change("owner_contact_id")
        and isinstance(owner_contact_id, str)
        and owner_contact_id != ""
    )
    has_owner_contact = (
        diff.has_change("owner_contact")
        and isinstance(owner_contact, dict)
        and len(owner_contact) > 0
    )

    if not has_owner_contact_id and not has_owner_contact:
        raise ConfigurationError(
            message="either `owner_contact_id` or `owner_contact` must be provided",
            details={"fields": ["owner_contact_id", "owner_contact"]},
        )

    if has_owner_contact_id and has_owner_contact:
        raise ConfigurationError(
            message="only one of `owner_contact_id` or `owner_contact` can be provided",
            details={"fields": ["owner_contact_id", "owner_contact"]},
        )
