from typing import Optional

from todo_app.schemas.user import UserOut


class UserSession:
    """Who is logged in for one console interaction.

    Each console owns its own instance, so two sessions in the same process
    never see each other's user.
    """

    def __init__(self) -> None:
        self._user: Optional[UserOut] = None

    @property
    def user(self) -> Optional[UserOut]:
        return self._user

    def start(self, user: UserOut) -> None:
        self._user = user

    def clear(self) -> None:
        self._user = None

    @property
    def is_active(self) -> bool:
        return self._user is not None
