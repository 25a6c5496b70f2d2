"""Validation and normalization of café records coming from the database."""

from typing import Any, Dict, Mapping, Optional

NAME_FALLBACK = "Unknown Cafe"


class CafeValidationError(ValueError):
    """Raised when a café row cannot be normalized."""


def validate_cafe(row: Any) -> Dict[str, Any]:
    """Validate and normalize a raw café row.

    - id must be a non-blank string and is trimmed.
    - place_id is a trimmed string or None (blank becomes None).
    - name is trimmed, "Unknown Cafe" when missing or blank.
    - is_active is a bool or None.
    Other fields are carried through unchanged. Validating an already
    validated row returns an equal row.

    Args:
        row: Raw record, e.g. a PostgREST result row.

    Returns:
        New dict with the normalized fields.

    Raises:
        CafeValidationError: If the row is not a mapping or has invalid fields.
    """
    if not isinstance(row, Mapping):
        raise CafeValidationError("validate_cafe: row must be a mapping")

    cafe_id = row.get("id")
    if not isinstance(cafe_id, str) or not cafe_id.strip():
        raise CafeValidationError(
            "validate_cafe: id is required and must be a non-empty string"
        )

    place_id = row.get("place_id")
    if place_id is not None:
        if not isinstance(place_id, str):
            raise CafeValidationError(
                "validate_cafe: place_id must be a string when present"
            )
        place_id = place_id.strip() or None

    name = row.get("name")
    if isinstance(name, str) and name.strip():
        name = name.strip()
    else:
        name = NAME_FALLBACK

    is_active = row.get("is_active")
    if is_active is not None and not isinstance(is_active, bool):
        raise CafeValidationError(
            "validate_cafe: is_active must be boolean or null when present"
        )

    return {
        **row,
        "id": cafe_id.strip(),
        "place_id": place_id,
        "name": name,
        "is_active": is_active,
    }


def validate_cafe_or_none(row: Any) -> Optional[Dict[str, Any]]:
    """Same as validate_cafe, returning None instead of raising."""
    try:
        return validate_cafe(row)
    except CafeValidationError:
        return None
