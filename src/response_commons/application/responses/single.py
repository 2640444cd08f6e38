"""Application responses – SingleDataResponse envelope."""
from __future__ import annotations

import dataclasses
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class SingleDataResponse(Generic[T]):
    """Success envelope for one object: ``{code, message, data}``."""

    code: int
    message: str
    data: T

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, "data": self.data}


def generate_single_data_response(
    data: T,
    message: str = "",
    status_code: int | None = 0,
) -> SingleDataResponse[T]:
    """Empty *message* becomes ``"Success"``, a zero status becomes 200."""
    return SingleDataResponse(
        code=status_code or 200,
        message=message or "Success",
        data=data,
    )


__all__ = ["SingleDataResponse", "generate_single_data_response"]
