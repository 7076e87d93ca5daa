"""Object model of a resolved Swagger 2.0 document.

* :mod:`~swagvet.api.swagger_api` -- :func:`create` and :class:`SwaggerApi`,
  document navigation and document validation.
* :mod:`~swagvet.api.path` -- path templates and request URL matching.
* :mod:`~swagvet.api.operation` -- operations and request validation.
* :mod:`~swagvet.api.response` -- response definitions and response
  validation.
* :mod:`~swagvet.api.parameter` / :mod:`~swagvet.api.parameter_value` --
  parameter definitions and per-request parameter values.
"""

from swagvet.api.operation import Operation
from swagvet.api.parameter import Parameter
from swagvet.api.parameter_value import ParameterValue
from swagvet.api.path import Path
from swagvet.api.response import Response
from swagvet.api.swagger_api import SwaggerApi, create

__all__ = [
    "Operation",
    "Parameter",
    "ParameterValue",
    "Path",
    "Response",
    "SwaggerApi",
    "create",
]
