from enum import Enum
from dataclasses import dataclass
from typing import Optional


class UserRole(str, Enum):
    CUSTOMER = "customer"
    ADMIN = "admin"


@dataclass
class User:
    user_id: str
    email: str
    name: str
    role: UserRole = UserRole.CUSTOMER
    phone: Optional[str] = None

    @property
    def first_name(self) -> str:
        parts = self.name.split()
        return parts[0] if parts else ""

    @property
    def last_name(self) -> str:
        parts = self.name.split()
        return parts[1] if len(parts) > 1 else ""
