# backend/schemas/common.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


# Records are stored and served with camelCase keys; Python code uses snake_case.
class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_record(self) -> dict:
        """JSON-ready dict in the persisted (camelCase) layout."""
        return self.model_dump(mode="json", by_alias=True)


# Standard response envelope used by every endpoint
class ApiResponse(CamelModel, Generic[T]):
    success: bool = True
    data: Optional[T] = None
    count: Optional[int] = None
    message: Optional[str] = None
