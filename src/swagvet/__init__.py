"""swagvet -- Model and validate Swagger 2.0 API descriptions.

This package loads a Swagger 2.0 document (JSON or YAML, local file, remote
URL or stdin), resolves its JSON References and builds an object model of
its paths, operations, parameters and responses.  The model validates the
document itself (against the Swagger 2.0 schema, then semantically) and
validates HTTP requests and responses against the operations they target.

Typical usage::

    import swagvet

    api = swagvet.create({"definition": "petstore.yaml"})
    results = api.validate()

or from the command line::

    swagvet validate petstore.yaml

Modules:
    app: Typer application and CLI entry point.
    api: The document object model and request/response validation.
    models: Pydantic models shared across the entire package.
    config: XDG-aware configuration for the CLI.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes following clig.dev conventions.
    output: stdout/stderr formatting system with Rich support.
"""

from swagvet.api import SwaggerApi, create

__version__ = "0.1.0"

__all__ = ["SwaggerApi", "create", "__version__"]
