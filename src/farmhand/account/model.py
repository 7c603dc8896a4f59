from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    """Kinds of operator. Admins manage animals, farmers can only look."""

    ADMIN = "admin"
    FARMER = "farmer"

    @property
    def can_manage(self) -> bool:
        return self is Role.ADMIN

    @property
    def can_view(self) -> bool:
        return True


@dataclass(frozen=True)
class Account:
    username: str
    display_name: str
    role: Role

    @property
    def can_manage(self) -> bool:
        return self.role.can_manage

    @property
    def can_view(self) -> bool:
        return self.role.can_view
