from typing import Literal, Optional

from schemas.common import CamelModel


# Product category; parent_id allows a simple hierarchy
class Category(CamelModel):
    id: str
    name: str
    description: Optional[str] = None
    parent_id: Optional[str] = None
    status: Literal["active", "inactive"] = "active"
