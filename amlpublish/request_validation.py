"""
Contains client-side validation functions
"""
import inspect
import re
from collections.abc import Mapping
from typing import Any, Callable, Iterable

import pandas

from .errors import SchemaError

_VERSION_PATTERN = re.compile(r"^(\d+)\.(\d+)")


def validate_function(fun: Any):
    if isinstance(fun, str):
        raise ValueError("You must specify 'fun' as a function, not a character")
    if not callable(fun):
        raise ValueError("The argument 'fun' must be a function.")
    try:
        parameters = inspect.signature(fun).parameters
    except (TypeError, ValueError):
        # builtins without a signature
        return
    if not parameters:
        raise ValueError("The function 'fun' must have at least one argument.")


def validate_input_schema(input_schema: Any):
    if not isinstance(input_schema, (Mapping, pandas.DataFrame)):
        raise ValueError(
            "You must specify input_schema as either a dict or a pandas.DataFrame"
        )


def validate_schema_matches_signature(fun: Callable, names: Iterable[str]):
    """Every input schema name must be an argument of ``fun``."""
    try:
        parameters = inspect.signature(fun).parameters
    except (TypeError, ValueError):
        return
    if any(
        parameter.kind is inspect.Parameter.VAR_KEYWORD
        for parameter in parameters.values()
    ):
        return
    unknown = [name for name in names if name not in parameters]
    if unknown:
        raise SchemaError(
            f"input_schema names {unknown} are not arguments of {getattr(fun, '__name__', fun)}"
        )


def language_version(version: str) -> str:
    """``"3.5.2"`` -> ``"3.5"``."""
    match = _VERSION_PATTERN.match(str(version))
    if match is None:
        raise ValueError(
            f"version must look like 'major.minor', got '{version}'"
        )
    return f"{match.group(1)}.{match.group(2)}"
