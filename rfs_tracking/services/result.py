"""Explicit handler results.

Handlers return ``Ok`` or ``HandlerError`` instead of raising; the router
turns either into a wire payload.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    def to_payload(self) -> dict:
        return self.value.model_dump(by_alias=True)


@dataclass(frozen=True)
class HandlerError:
    message: str

    @classmethod
    def from_exception(cls, exc: BaseException) -> "HandlerError":
        return cls(f"{type(exc).__name__}: {exc}")

    def to_payload(self) -> dict:
        return {"success": False, "error": self.message}


Result = Union[Ok[T], HandlerError]
