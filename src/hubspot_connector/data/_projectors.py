# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Entity field projectors.

A projector copies the top-level fields of a raw record that live outside its
``properties`` map (identifiers, flags, relations) onto the flattened record,
renaming kebab-case wire names to the flat model's camelCase names.

The set of projectors is closed: :data:`CONTACT` and :data:`COMPANY`. Callers
select one per call, by instance or by name through :func:`get_projector`.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Protocol, Tuple, runtime_checkable

from ..core._error_codes import VALIDATION_UNKNOWN_PROJECTOR
from ..core.errors import ValidationError


@runtime_checkable
class FieldProjector(Protocol):
    """Capability shared by all projectors."""

    name: str

    def project(self, raw: Mapping[str, Any]) -> Dict[str, Any]:
        """Return the fields to merge into the flattened form of ``raw``."""
        ...


class _MappedFieldProjector:
    """
    Projector driven by a field table.

    :param name: Projector name used for lookup.
    :type name: str
    :param identifier: ``(wire_name, flat_name)`` pair copied unconditionally.
    :type identifier: tuple[str, str]
    :param optional_fields: ``(wire_name, flat_name)`` pairs copied only when present and not None.
    :type optional_fields: tuple[tuple[str, str], ...]
    """

    def __init__(
        self,
        name: str,
        identifier: Tuple[str, str],
        optional_fields: Tuple[Tuple[str, str], ...],
    ) -> None:
        self.name = name
        self._identifier = identifier
        self._optional_fields = optional_fields

    def project(self, raw: Mapping[str, Any]) -> Dict[str, Any]:
        wire_id, flat_id = self._identifier
        patch: Dict[str, Any] = {flat_id: raw.get(wire_id)}
        for wire_name, flat_name in self._optional_fields:
            value = raw.get(wire_name)
            if value is not None:
                patch[flat_name] = value
        return patch

    def __repr__(self) -> str:
        return f"<FieldProjector {self.name}>"


CONTACT = _MappedFieldProjector(
    "contact",
    identifier=("vid", "vid"),
    optional_fields=(
        ("canonical-vid", "canonicalVid"),
        ("is-contact", "isContact"),
        ("identity-profiles", "identityProfiles"),
        ("list-memberships", "listMemberships"),
        ("form-submissions", "formSubmissions"),
        ("associated-company", "company"),
    ),
)

COMPANY = _MappedFieldProjector(
    "company",
    identifier=("companyId", "companyId"),
    optional_fields=(
        ("isDeleted", "isDeleted"),
        ("source", "source"),
    ),
)

PROJECTORS: Mapping[str, FieldProjector] = {
    CONTACT.name: CONTACT,
    COMPANY.name: COMPANY,
}


def get_projector(name: str) -> FieldProjector:
    """
    Look up a projector by name.

    :param name: ``"contact"`` or ``"company"`` (case-insensitive).
    :type name: str
    :raises ValidationError: If no projector has that name.
    """
    projector = PROJECTORS.get((name or "").strip().lower())
    if projector is None:
        raise ValidationError(
            f"Unknown projector {name!r}. Expected one of: {', '.join(sorted(PROJECTORS))}.",
            subcode=VALIDATION_UNKNOWN_PROJECTOR,
        )
    return projector


__all__ = ["FieldProjector", "CONTACT", "COMPANY", "PROJECTORS", "get_projector"]
