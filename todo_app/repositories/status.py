from typing import List

from todo_app.errors import NotFoundError
from todo_app.models.status import Status
from todo_app.repositories.base import BaseRepository
from todo_app.schemas.task import StatusOut


class StatusRepository(BaseRepository):

    def find_status_by_name(self, status_name: str) -> StatusOut:
        with self._session() as db:
            status = db.query(Status).filter(Status.status_name == status_name).first()
            if not status:
                raise NotFoundError(f"Status not found: {status_name}")
            return StatusOut.model_validate(status)

    def list_statuses(self) -> List[StatusOut]:
        with self._session() as db:
            rows = db.query(Status).order_by(Status.id).all()
            return [StatusOut.model_validate(s) for s in rows]
