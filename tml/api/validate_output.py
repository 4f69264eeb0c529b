"""Check a command's output dict against the schema registered for it."""

from collections.abc import Callable
from typing import Any

from ._output_schemas import get_output_schema


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Validate ``output`` from ``func`` and fill in schema defaults.

    The schema is looked up from where ``func`` lives: ``cmd_create`` in
    ``tml.api.link`` maps to ``("link", "create")``. Anything outside
    ``tml.api`` or not named ``cmd_*`` is returned untouched.

    Raises:
        ValueError: If ``output`` does not fit the registered schema
    """
    package, _, module = func.__module__.partition(".api.")
    if package != "tml" or not module or not func.__name__.startswith("cmd_"):
        return output

    domain = module.split(".")[0]
    command_name = func.__name__.removeprefix("cmd_")
    schema_class = get_output_schema(domain, command_name)
    if schema_class is None:
        return output

    try:
        return schema_class(**output).model_dump(mode="python")
    except Exception as e:
        raise ValueError(f"Output validation failed for {domain}.{command_name}: {e}") from e
