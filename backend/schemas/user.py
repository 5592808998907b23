from datetime import datetime
from pydantic import EmailStr
from typing import List, Literal, Optional

from schemas.common import CamelModel

UserRole = Literal["admin", "manager", "staff"]

# Dashboard operator account; performedBy on transactions refers to username
class User(CamelModel):
    id: str
    username: str
    email: EmailStr
    full_name: str
    role: UserRole = "staff"
    permissions: List[str] = []
    status: Literal["active", "inactive"] = "active"
    last_login: Optional[datetime] = None
    created_at: datetime
