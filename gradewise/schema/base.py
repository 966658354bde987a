# gradewise/schema/base.py
from typing import Any, Dict, Generic, Optional, TypeVar

from pydantic import BaseModel

DataT = TypeVar("DataT")


class BaseResponse(BaseModel, Generic[DataT]):
    """Envelope shared by every API response"""
    status: bool = True
    message: str = "Success"
    data: Optional[DataT] = None
    # {"type": <error kind>, ...details}, only set on failure
    error: Optional[Dict[str, Any]] = None

    @classmethod
    def failure(
        cls,
        message: str,
        error_type: str,
        data: Optional[DataT] = None,
        **detail: Any,
    ) -> "BaseResponse[DataT]":
        return cls(
            status=False,
            message=message,
            data=data,
            error={"type": error_type, **detail},
        )
