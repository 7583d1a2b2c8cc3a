"""Validation of raw RPC results against expected shapes."""

from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from peercoin_rpc.core.errors import DecodingError

T = TypeVar("T")


@lru_cache(maxsize=128)
def _adapter(shape: Any) -> TypeAdapter:
    return TypeAdapter(shape)


def decode(shape: type[T] | Any, raw: Any) -> T:
    """
    Validate a raw RPC result against an expected shape.

    Parameters
    ----------
    shape : type[T] | Any
        Type descriptor understood by pydantic (a model, ``str``,
        ``list[UnspentOutput]``, ...)
    raw : Any
        Raw JSON-compatible result returned by the node

    Returns
    -------
    T
        Validated result

    Raises
    ------
    DecodingError
        If the raw result does not match the shape

    """
    try:
        return _adapter(shape).validate_python(raw)
    except ValidationError as e:
        msg = f"RPC result does not match {_shape_name(shape)}: {e.error_count()} validation error(s)"
        raise DecodingError(msg, raw_result=raw, errors=e.errors(include_url=False)) from e


def _shape_name(shape: Any) -> str:
    return getattr(shape, "__name__", None) or repr(shape)
