"""
Input and output schemas of published web services.

Azure ML types are different from, but related to, Python and R types. A schema
maps each parameter (or data frame column) name to one of the platform types
``double``, ``boolean``, ``int32`` or ``string`` (and, less commonly, ``int64``,
``date-time`` and ``time-span``). Types may be given as:

- R-style names: ``numeric``, ``logical``, ``integer`` and ``character`` map to
  ``double``, ``boolean``, ``int32`` and ``string`` respectively,
- the platform names themselves,
- Python types (``float``, ``bool``, ``int``, ``str``, ``datetime``, ``timedelta``),
- numpy dtypes or numpy scalar types.

Alternatively an example ``pandas.DataFrame`` can be passed and the column types
are inferred from its data.
"""
import datetime
from collections.abc import Mapping
from typing import Any, Dict

import numpy
import pandas
from pandas.api.types import infer_dtype

from .constants import DEFAULT_OUTPUT_NAME
from .errors import SchemaError

DOUBLE = "double"
BOOLEAN = "boolean"
INT32 = "int32"
INT64 = "int64"
STRING = "string"
DATE_TIME = "date-time"
TIME_SPAN = "time-span"

Schema = Dict[str, str]

TYPE_ALIASES = {
    "numeric": DOUBLE,
    "double": DOUBLE,
    "number": DOUBLE,
    "float": DOUBLE,
    "logical": BOOLEAN,
    "boolean": BOOLEAN,
    "bool": BOOLEAN,
    "integer": INT32,
    "int": INT32,
    "int32": INT32,
    "int64": INT64,
    "character": STRING,
    "string": STRING,
    "str": STRING,
    "factor": STRING,
    "date-time": DATE_TIME,
    "datetime": DATE_TIME,
    "posixct": DATE_TIME,
    "time-span": TIME_SPAN,
    "timedelta": TIME_SPAN,
    "difftime": TIME_SPAN,
}

# bool before int: bool is an int subclass
PYTHON_TYPES = (
    (bool, BOOLEAN),
    (int, INT32),
    (float, DOUBLE),
    (str, STRING),
    (datetime.date, DATE_TIME),
    (datetime.timedelta, TIME_SPAN),
)

DTYPE_KINDS = {
    "b": BOOLEAN,
    "i": INT32,
    "u": INT32,
    "f": DOUBLE,
    "M": DATE_TIME,
    "m": TIME_SPAN,
    "U": STRING,
    "S": STRING,
    "O": STRING,
}

# Results of pandas.api.types.infer_dtype; anything else is sent as a string.
INFERRED_TYPES = {
    "floating": DOUBLE,
    "mixed-integer-float": DOUBLE,
    "decimal": DOUBLE,
    "integer": INT32,
    "boolean": BOOLEAN,
    "datetime64": DATE_TIME,
    "datetime": DATE_TIME,
    "date": DATE_TIME,
    "timedelta64": TIME_SPAN,
    "timedelta": TIME_SPAN,
}

WIRE_DESCRIPTORS = {
    DOUBLE: {"type": "number", "format": "double"},
    BOOLEAN: {"type": "boolean"},
    INT32: {"type": "integer", "format": "int32"},
    INT64: {"type": "integer", "format": "int64"},
    STRING: {"type": "string", "format": "string"},
    DATE_TIME: {"type": "string", "format": "date-time"},
    TIME_SPAN: {"type": "string", "format": "time-span"},
}


def azure_type(spec: Any) -> str:
    """Resolves a single type specification to an Azure ML type name."""
    if isinstance(spec, str):
        try:
            return TYPE_ALIASES[spec.lower()]
        except KeyError:
            raise SchemaError(
                f"Unknown type '{spec}'. Use one of {sorted(TYPE_ALIASES)}"
            ) from None
    if isinstance(spec, type):
        for python_type, platform_type in PYTHON_TYPES:
            if issubclass(spec, python_type):
                return platform_type
    if isinstance(spec, numpy.dtype) or (
        isinstance(spec, type) and issubclass(spec, numpy.generic)
    ):
        kind = numpy.dtype(spec).kind
        if kind in DTYPE_KINDS:
            return DTYPE_KINDS[kind]
    raise SchemaError(f"Cannot map {spec!r} to an Azure ML type")


def _series_type(values: pandas.Series) -> str:
    return INFERRED_TYPES.get(infer_dtype(values, skipna=True), STRING)


def _value_type(value: Any) -> str:
    if isinstance(value, pandas.Series):
        return _series_type(value)
    if isinstance(value, (list, tuple, numpy.ndarray)):
        return _series_type(pandas.Series(list(value), dtype=object))
    return _series_type(pandas.Series([value]))


def _frame_schema(frame: pandas.DataFrame) -> Schema:
    return {str(column): _series_type(frame[column]) for column in frame.columns}


def azure_schema(schema: Any) -> Schema:
    """Converts an explicit schema, or an example data frame, to an Azure ML schema.

    Parameters:
        schema: Either a mapping of names to type specifications, formatted as
            ``{"arg1": "numeric", "arg2": str, ...}``, or an example input
            ``pandas.DataFrame``.

    Returns:
        An ordered mapping of names to Azure ML type names.
    """
    if isinstance(schema, pandas.DataFrame):
        return _frame_schema(schema)
    if isinstance(schema, Mapping):
        return {str(name): azure_type(spec) for name, spec in schema.items()}
    raise SchemaError(
        f"A schema must be a mapping or a pandas.DataFrame, got {type(schema).__name__}"
    )


def infer_schema(example: Any) -> Schema:
    """Infers a schema from an example function output.

    Data frames and mappings produce one entry per column or key. Any other
    value produces a single entry named ``ans``.
    """
    if isinstance(example, pandas.DataFrame):
        return _frame_schema(example)
    if isinstance(example, Mapping):
        return {str(name): _value_type(value) for name, value in example.items()}
    return {DEFAULT_OUTPUT_NAME: _value_type(example)}


def schema_payload(schema: Schema) -> Dict[str, Dict[str, str]]:
    return {name: dict(WIRE_DESCRIPTORS[kind]) for name, kind in schema.items()}
