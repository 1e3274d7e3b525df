"""
Result type for record-store reads.

A read either produced a value (`Ok`) or failed and was replaced by the
caller's default (`Fallback`). Failures stop here: they are logged and never
re-raised.
"""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Fallback(Generic[T]):
    value: T
    error: Optional[BaseException] = None


ReadResult = Union[Ok[T], Fallback[T]]


async def read_or_fallback(read: Callable[[], Awaitable[T]], default: T, what: str) -> ReadResult:
    """Run a store read, substituting ``default`` if it raises."""
    try:
        return Ok(await read())
    except Exception as e:
        logger.error(f"Error reading {what}: {str(e)}")
        return Fallback(default, e)
