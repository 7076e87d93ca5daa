"""The value of one parameter in one request.

A :class:`ParameterValue` wraps the raw value taken from a request and
lazily computes:

* ``value`` -- the raw value converted to the parameter's type (see
  :func:`~swagvet.validation.coercion.convert_value`), or its default when
  absent.
* ``valid`` / ``error`` -- requiredness and JSON Schema validity of that
  value.

Both computations run at most once.  Reading ``valid`` or ``error`` always
computes ``value`` first.  Failures are stored as
:class:`~swagvet.exceptions.ParameterValueError` instances and never raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional, Union

from swagvet.exceptions import ConversionError, ParameterValueError
from swagvet.validation.coercion import convert_value, default_value, to_json_compatible
from swagvet.validation.json_schema import validate_against_schema

if TYPE_CHECKING:
    from swagvet.api.parameter import Parameter


class Uncomputed:
    """Marker for a cache slot that has not been computed yet."""

    def __repr__(self) -> str:
        return "UNCOMPUTED"


UNCOMPUTED = Uncomputed()


@dataclass(frozen=True)
class ComputedValue:
    value: Any
    error: Optional[ParameterValueError] = None


@dataclass(frozen=True)
class ComputedValidity:
    valid: bool
    error: Optional[ParameterValueError] = None


class ParameterValue:
    """Converted and validated value of a :class:`~swagvet.api.parameter.Parameter`.

    Attributes:
        parameter: The parameter this value belongs to.
        raw: The value exactly as found in the request.
    """

    def __init__(self, parameter: Parameter, raw: Any) -> None:
        self.parameter = parameter
        self.raw = raw
        self._value: Union[Uncomputed, ComputedValue] = UNCOMPUTED
        self._validity: Union[Uncomputed, ComputedValidity] = UNCOMPUTED

    def __repr__(self) -> str:
        return f"ParameterValue(name={self.parameter.name!r}, raw={self.raw!r})"

    @property
    def value(self) -> Any:
        return self._computed_value().value

    @property
    def valid(self) -> bool:
        return self._computed_validity().valid

    @property
    def error(self) -> Optional[ParameterValueError]:
        return self._computed_validity().error

    @property
    def is_computed(self) -> bool:
        """``True`` once ``value`` has been computed."""
        return not isinstance(self._value, Uncomputed)

    def _computed_value(self) -> ComputedValue:
        if isinstance(self._value, Uncomputed):
            self._value = self._compute_value()
        return self._value

    def _computed_validity(self) -> ComputedValidity:
        computed = self._computed_value()
        if isinstance(self._validity, Uncomputed):
            self._validity = self._compute_validity(computed)
        return self._validity

    def _compute_value(self) -> ComputedValue:
        parameter = self.parameter
        schema = parameter.schema

        if parameter.type == "file" or (parameter.allow_empty_value and self.raw == ""):
            value = self.raw
        else:
            try:
                value = convert_value(schema, parameter.collection_format, self.raw)
            except ConversionError as exc:
                return ComputedValue(None, ParameterValueError(exc.message, code=exc.code))

        if value is None:
            value = default_value(schema)
        return ComputedValue(value)

    def _compute_validity(self, computed: ComputedValue) -> ComputedValidity:
        if computed.error is not None:
            return ComputedValidity(False, computed.error)

        parameter = self.parameter
        value = computed.value

        if value is None:
            if parameter.required:
                return ComputedValidity(
                    False,
                    ParameterValueError(
                        "Value is required",
                        code="REQUIRED",
                        path=parameter.path_to_definition,
                        failed_validation=True,
                    ),
                )
            return ComputedValidity(True)

        if parameter.type == "file" or (parameter.allow_empty_value and value == ""):
            return ComputedValidity(True)

        api = parameter.api
        errors = validate_against_schema(
            parameter.schema, to_json_compatible(value), api.formats, api.definition
        )
        if errors:
            return ComputedValidity(
                False,
                ParameterValueError(
                    "Value failed JSON Schema validation",
                    code="SCHEMA_VALIDATION_FAILED",
                    errors=errors,
                    path=parameter.path_to_definition,
                    failed_validation=True,
                ),
            )
        return ComputedValidity(True)
