# galleryadmin/result.py
"""
Explicit success/failure values for the service layer.

Services return Ok(value) or Err(error) instead of raising, so each caller has
to decide what an EncodingError, NotFoundError, ... means for it.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E


Result = Union[Ok[T], Err[E]]
