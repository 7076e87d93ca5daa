"""Per-API registry of JSON Schema ``format`` validators.

Swagger 2.0 adds a handful of formats on top of JSON Schema (``int32``,
``int64``, ``float``, ``double``, ``byte``, ``password``).  Every
:class:`~swagvet.api.swagger_api.SwaggerApi` owns a :class:`FormatRegistry`
seeded with them; user formats registered through
:meth:`~swagvet.api.swagger_api.SwaggerApi.register_format` are added to the
same registry and never leak into other API instances.

The registry is converted into a :class:`jsonschema.FormatChecker` for each
validation call (see :func:`~swagvet.validation.json_schema.validate_against_schema`).
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterator

from jsonschema import FormatChecker

logger = logging.getLogger(__name__)

FormatValidator = Callable[[Any], bool]

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _integer_in_range(value: Any, minimum: int, maximum: int) -> bool:
    # Non-numeric values are left to the ``type`` keyword
    if not _is_number(value):
        return True
    if isinstance(value, float) and not value.is_integer():
        return False
    return minimum <= value <= maximum


def validate_int32(value: Any) -> bool:
    return _integer_in_range(value, INT32_MIN, INT32_MAX)


def validate_int64(value: Any) -> bool:
    return _integer_in_range(value, INT64_MIN, INT64_MAX)


def _always_valid(value: Any) -> bool:
    return True


DEFAULT_FORMATS: dict[str, FormatValidator] = {
    "int32": validate_int32,
    "int64": validate_int64,
    "float": _always_valid,
    "double": _always_valid,
    "byte": _always_valid,
    "password": _always_valid,
}


class FormatRegistry:
    """Mapping of format name to predicate, owned by one API instance.

    Predicates receive the instance value and return ``True`` when it is
    valid for the format.

    Example::

        registry = FormatRegistry()
        registry.register("always-false", lambda value: False)
        checker = registry.format_checker()
    """

    def __init__(self, formats: dict[str, FormatValidator] | None = None) -> None:
        self._formats: dict[str, FormatValidator] = dict(DEFAULT_FORMATS)
        for name, validator in (formats or {}).items():
            self.register(name, validator)

    def register(self, name: Any, validator: Any) -> None:
        """Add (or replace) the predicate for *name*.

        Raises:
            TypeError: If *name* is not a non-empty string or *validator* is
                not callable.
        """
        if name is None or name == "":
            raise TypeError("name is required")
        if not isinstance(name, str):
            raise TypeError("name must be a string")
        if validator is None:
            raise TypeError("validator is required")
        if not callable(validator):
            raise TypeError("validator must be a function")
        logger.debug("Registering format validator %r", name)
        self._formats[name] = validator

    def unregister(self, name: Any) -> None:
        """Remove the predicate for *name* (a no-op when it is unknown).

        Raises:
            TypeError: If *name* is not a non-empty string.
        """
        if name is None or name == "":
            raise TypeError("name is required")
        if not isinstance(name, str):
            raise TypeError("name must be a string")
        self._formats.pop(name, None)

    def format_checker(self) -> FormatChecker:
        """Build a :class:`jsonschema.FormatChecker` with the built-in JSON
        Schema formats plus every registered predicate."""
        checker = FormatChecker()
        for name, validator in self._formats.items():
            checker.checks(name)(validator)
        return checker

    def __contains__(self, name: object) -> bool:
        return name in self._formats

    def __iter__(self) -> Iterator[str]:
        return iter(self._formats)

    def __len__(self) -> int:
        return len(self._formats)
