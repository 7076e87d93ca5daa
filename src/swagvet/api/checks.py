"""Helpers shared by request and response validation."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

from swagvet.models import ValidationResults

DEFAULT_CONTENT_TYPE = "application/octet-stream"

FORM_CONTENT_TYPES: tuple[str, ...] = (
    "application/x-www-form-urlencoded",
    "multipart/form-data",
)

STRICT_MODE_LOCATIONS: tuple[str, ...] = ("formData", "header", "query")


def get_header(headers: Any, name: str) -> Any:
    """Case-insensitive header lookup; ``None`` when absent."""
    if not isinstance(headers, Mapping):
        return None
    wanted = name.lower()
    for key, value in headers.items():
        if str(key).lower() == wanted:
            return value
    return None


def media_type(content_type: str) -> str:
    """Strip parameters from a Content-Type value.

    Example::

        media_type("application/json; charset=utf-8")
        # 'application/json'
    """
    return content_type.split(";", 1)[0].strip().lower()


def check_target(target: Any, name: str) -> None:
    if target is None:
        raise TypeError(f"{name} is required")
    if not isinstance(target, Mapping):
        raise TypeError(f"{name} must be an object")


def normalize_options(options: Any) -> tuple[dict[str, bool], list[Callable[..., Any]]]:
    """Validate request/response validation options.

    Args:
        options: ``None`` or a mapping with optional ``strict_mode`` (bool or
            mapping of ``formData``/``header``/``query`` to bool) and
            ``custom_validators`` (list of callables).

    Returns:
        ``(strict_mode, custom_validators)`` with ``strict_mode`` expanded to
        one flag per location.

    Raises:
        TypeError: If any option has the wrong type.
    """
    if options is None:
        options = {}
    if not isinstance(options, Mapping):
        raise TypeError("options must be an object")

    custom_validators = options.get("custom_validators")
    if custom_validators is None:
        custom_validators = []
    elif not isinstance(custom_validators, (list, tuple)):
        raise TypeError("options.custom_validators must be an array")
    for index, validator in enumerate(custom_validators):
        if not callable(validator):
            raise TypeError(f"options.custom_validators at index {index} must be a function")

    strict_mode = options.get("strict_mode", False)
    if isinstance(strict_mode, bool):
        strict = {location: strict_mode for location in STRICT_MODE_LOCATIONS}
    elif isinstance(strict_mode, Mapping):
        strict = {}
        for location in STRICT_MODE_LOCATIONS:
            value = strict_mode.get(location, False)
            if not isinstance(value, bool):
                raise TypeError(f"options.strict_mode.{location} must be a boolean")
            strict[location] = value
    else:
        raise TypeError("options.strict_mode must be a boolean or an object")

    return strict, list(custom_validators)


def check_content_type(
    headers: Any, supported: list[str], results: ValidationResults
) -> None:
    """Report ``INVALID_CONTENT_TYPE`` when the Content-Type is not supported."""
    if not supported:
        return
    raw = get_header(headers, "content-type") or DEFAULT_CONTENT_TYPE
    parsed = media_type(raw)
    if raw in supported or parsed in [media_type(value) for value in supported]:
        return
    results.add_error(
        "INVALID_CONTENT_TYPE",
        f"Invalid Content-Type ({parsed}).  These are supported: {', '.join(supported)}",
        [],
    )


def run_custom_validators(
    validators: list[Callable[..., Any]],
    target: Any,
    owner: Any,
    results: ValidationResults,
) -> None:
    """Call each validator as ``validator(target, owner)`` and collect its findings."""
    for validator in validators:
        results.extend(ValidationResults.from_validator_output(validator(target, owner)))
