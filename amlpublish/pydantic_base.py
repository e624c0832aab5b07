"""
NOTE:
Models are written against the pydantic v1 API. With pydantic v2 installed the
same API is importable from ``pydantic.v1``.
"""
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pydantic.v1 import BaseModel
else:
    try:
        from pydantic.v1 import BaseModel  # pylint: disable=no-name-in-module
    except ImportError:
        from pydantic import BaseModel


class ImmutableModel(BaseModel):  # pylint: disable=used-before-assignment
    class Config:
        allow_mutation = False
