import logging
from typing import Optional

from todo_app.models.clock import utcnow
from todo_app.models.user import User
from todo_app.repositories.base import BaseRepository
from todo_app.schemas.user import UserOut

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository):

    def find_user_by_name(self, name: str) -> Optional[UserOut]:
        with self._session() as db:
            user = db.query(User).filter(User.name == name).first()
            return UserOut.model_validate(user) if user else None

    def find_user_by_id(self, user_id: int) -> Optional[UserOut]:
        with self._session() as db:
            user = db.query(User).filter(User.id == user_id).first()
            return UserOut.model_validate(user) if user else None

    def create_user(self, name: str, password: str) -> UserOut:
        with self._session() as db:
            user = User(name=name, password=password, created_date=utcnow())
            db.add(user)
            db.flush()
            logger.info("Created user id=%s name=%s", user.id, name)
            return UserOut.model_validate(user)

    def validate_credentials(self, name: str, password: str) -> Optional[UserOut]:
        """Return the user only when both name and password match exactly."""
        with self._session() as db:
            user = (
                db.query(User)
                .filter(User.name == name, User.password == password)
                .first()
            )
            return UserOut.model_validate(user) if user else None
