import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError

from todo_app.errors import NotFoundError, StorageError, ValidationError
from todo_app.repositories.user import UserRepository
from todo_app.schemas.user import UserCreate, UserOut
from todo_app.services.session import UserSession
from todo_app.services.validation import parse

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password"
USER_EXISTS = "User already exists, please select a different username."


class AuthService:
    def __init__(self, users: Optional[UserRepository] = None, session: Optional[UserSession] = None):
        self.users = users or UserRepository()
        self.session = session or UserSession()

    def register(self, name: str, password: str) -> UserOut:
        data = parse(UserCreate, name=name or "", password=password or "")

        if self.users.find_user_by_name(data.name):
            raise ValidationError(USER_EXISTS)

        try:
            user = self.users.create_user(data.name, data.password)
        except StorageError as exc:
            # another console took the name between the check and the insert
            if isinstance(exc.__cause__, IntegrityError):
                raise ValidationError(USER_EXISTS) from exc
            raise
        self.session.start(user)
        logger.info("Registered user %s", user.name)
        return user

    def login(self, name: str, password: str) -> UserOut:
        # every failure gets the same message so nothing leaks about which field was wrong
        if not name or not name.strip() or not password or not password.strip():
            raise ValidationError(INVALID_CREDENTIALS)

        user = self.users.validate_credentials(name.strip(), password)
        if not user:
            logger.info("Failed login for %r", name.strip())
            raise ValidationError(INVALID_CREDENTIALS)

        self.session.start(user)
        logger.info("User %s logged in", user.name)
        return user

    def logout(self) -> None:
        if self.session.user:
            logger.info("User %s logged out", self.session.user.name)
        self.session.clear()

    def is_logged_in(self) -> bool:
        return self.session.is_active

    @property
    def current_user(self) -> Optional[UserOut]:
        return self.session.user

    def find_user(self, name: str) -> UserOut:
        name = (name or "").strip()
        if not name:
            raise ValidationError("Username cannot be empty.")
        user = self.users.find_user_by_name(name)
        if not user:
            raise NotFoundError(f"User not found: {name}")
        return user
