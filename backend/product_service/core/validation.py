"""Request Validation: field-level non-blank checks on inbound product payloads.

Invariants:
    - Runs before the service is invoked; contains no domain logic
    - Collects ALL violations, never stops at the first one
    - A field is invalid when absent, null, not a string, or whitespace-only
    - Violation order follows REQUIRED_FIELDS order (title, then details)
"""

from typing import Any

REQUIRED_FIELDS = ("title", "details")

# 8-4-4-4-12 hex digits; no braces, urn prefix or bare 32-hex form
CANONICAL_UUID_PATTERN = (
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)


def validate_product_request(request: Any) -> list[str]:
    """Return every violation message for a create/update request (empty list = valid).

    Accepts a request object (attribute access) or a plain mapping.
    """
    violations: list[str] = []
    for name in REQUIRED_FIELDS:
        violation = _check_not_blank(name, _read_field(request, name))
        if violation:
            violations.append(violation)
    return violations


def _read_field(request: Any, name: str) -> Any:
    if request is None:
        return None
    if isinstance(request, dict):
        return request.get(name)
    return getattr(request, name, None)


def _check_not_blank(name: str, value: Any) -> str | None:
    if value is None:
        return f"{name} must not be null"
    if not isinstance(value, str):
        return f"{name} must be a string"
    if not value.strip():
        return f"{name} must not be blank"
    return None
