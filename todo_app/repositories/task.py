import logging
from typing import Iterable, List, Optional

from todo_app.errors import NotFoundError
from todo_app.models.category import Category
from todo_app.models.clock import utcnow
from todo_app.models.status import Status
from todo_app.models.task import Task
from todo_app.models.user import User
from todo_app.repositories.base import BaseRepository
from todo_app.schemas.task import TaskOut, TaskView

logger = logging.getLogger(__name__)


def _joined(db):
    """Tasks with owner, status and category names resolved."""
    return (
        db.query(
            Task.id,
            User.name.label("username"),
            Task.task_name,
            Status.status_name,
            Category.category_name,
            Task.created_date,
            Task.updated_date,
        )
        .outerjoin(Status, Task.status_id == Status.id)
        .outerjoin(Category, Task.category_id == Category.id)
        .outerjoin(User, Task.user_id == User.id)
    )


def _newest_first(query):
    return query.order_by(Task.updated_date.desc(), Task.id.desc())


class TaskRepository(BaseRepository):

    def create_task(self, task_name: str, status_id: int, user_id: int, category_id: int) -> TaskOut:
        now = utcnow()
        with self._session() as db:
            task = Task(
                task_name=task_name,
                status_id=status_id,
                user_id=user_id,
                category_id=category_id,
                created_date=now,
                updated_date=now,
            )
            db.add(task)
            db.flush()
            logger.info("Created task id=%s owner=%s", task.id, user_id)
            return TaskOut.model_validate(task)

    def _update(self, task_id: int, values: dict) -> None:
        values["updated_date"] = utcnow()
        with self._session() as db:
            changed = (
                db.query(Task)
                .filter(Task.id == task_id)
                .update(values, synchronize_session=False)
            )
        if changed == 0:
            raise NotFoundError(f"Task not found: {task_id}")
        logger.debug("Updated task id=%s fields=%s", task_id, sorted(values))

    def update_task_name_and_status(self, task_id: int, task_name: str, status_id: int) -> None:
        self._update(task_id, {"task_name": task_name, "status_id": status_id})

    def update_task_owner_and_status(self, task_id: int, user_id: int, status_id: int) -> None:
        self._update(task_id, {"user_id": user_id, "status_id": status_id})

    def update_task_status(self, task_id: int, status_id: int) -> None:
        self._update(task_id, {"status_id": status_id})

    def get_task(self, task_id: int) -> Optional[TaskView]:
        with self._session() as db:
            row = _joined(db).filter(Task.id == task_id).first()
            return TaskView.model_validate(row) if row else None

    def list_tasks_by_owner(
        self,
        user_id: int,
        only_statuses: Optional[Iterable[str]] = None,
        exclude_statuses: Optional[Iterable[str]] = None,
    ) -> List[TaskView]:
        """Owner's tasks. None skips a status set; an empty set is applied as given."""
        with self._session() as db:
            query = _joined(db).filter(Task.user_id == user_id)
            if only_statuses is not None:
                query = query.filter(Status.status_name.in_(list(only_statuses)))
            if exclude_statuses is not None:
                query = query.filter(Status.status_name.notin_(list(exclude_statuses)))
            return [TaskView.model_validate(r) for r in _newest_first(query).all()]

    def list_tasks_by_owner_filtered(
        self,
        user_id: int,
        status_name: Optional[str] = None,
        category_name: Optional[str] = None,
    ) -> List[TaskView]:
        """Owner's tasks, narrowed by whichever of the two names is set."""
        with self._session() as db:
            query = _joined(db).filter(Task.user_id == user_id)
            if status_name and status_name.strip():
                query = query.filter(Status.status_name == status_name.strip())
            if category_name and category_name.strip():
                query = query.filter(Category.category_name == category_name.strip())
            return [TaskView.model_validate(r) for r in _newest_first(query).all()]

    def task_is_owned_by(self, task_id: int, user_id: int) -> bool:
        with self._session() as db:
            found = (
                db.query(Task.id)
                .filter(Task.id == task_id, Task.user_id == user_id)
                .first()
            )
            return found is not None
