from dataclasses import dataclass
from typing import Union

from expo_portal.core.choices import Role
from expo_portal.models.user import User


@dataclass(frozen=True)
class StudentActor:
    profile: User

    @property
    def id(self) -> int:
        return self.profile.id


@dataclass(frozen=True)
class AdminActor:
    profile: User

    @property
    def id(self) -> int:
        return self.profile.id


Actor = Union[StudentActor, AdminActor]


def actor_for(user: User) -> Actor:
    if user.role == Role.ADMIN.value:
        return AdminActor(user)
    return StudentActor(user)
