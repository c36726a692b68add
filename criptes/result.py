"""
Result values
=============
Success-or-error values returned across every public engine boundary.

    Ok(value)   the operation succeeded
    Err(error)  the operation failed with a CriptesError

Callers branch on ``result.ok`` and read ``value`` or ``message``.
``unwrap()`` turns an Err back into a raised exception for callers that
prefer that style.
"""

import functools
import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

from .errors import CriptesError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    ok = True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    error: CriptesError

    ok = False

    @property
    def message(self) -> str:
        return self.error.message

    def unwrap(self):
        raise self.error


Result = Union[Ok[T], Err]


def as_result(fn: Callable[..., Any]) -> Callable[..., Result]:
    """Wrap the return value in Ok and a raised CriptesError in Err."""

    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        try:
            return Ok(fn(*args, **kwargs))
        except CriptesError as exc:
            logger.debug("%s failed: %s: %s",
                         fn.__qualname__, type(exc).__name__, exc)
            return Err(exc)

    return wrapper
