"""Task lifecycle: what a user may do to a task, and in which state.

States are the five status rows. A new task starts as ``ready_to_pick``;
``deleted`` is terminal and only reached through a soft delete. Every
mutation except assignment is allowed only for the task's owner.
"""

import logging
from typing import List, Optional

from todo_app.errors import NotFoundError, ValidationError
from todo_app.models.status import (
    BLOCKED,
    COMPLETED,
    DELETED,
    IN_PROGRESS,
    READY_TO_PICK,
    STARTABLE,
)
from todo_app.repositories.category import CategoryRepository
from todo_app.repositories.status import StatusRepository
from todo_app.repositories.task import TaskRepository
from todo_app.repositories.user import UserRepository
from todo_app.schemas.task import CategoryOut, StatusOut, TaskCreate, TaskOut, TaskRename, TaskView
from todo_app.services.validation import parse

logger = logging.getLogger(__name__)

NOT_FOUND_OR_UNAUTHORIZED = "Task not found or unauthorized"


class TaskService:
    def __init__(
        self,
        tasks: Optional[TaskRepository] = None,
        statuses: Optional[StatusRepository] = None,
        categories: Optional[CategoryRepository] = None,
        users: Optional[UserRepository] = None,
    ):
        self.tasks = tasks or TaskRepository()
        self.statuses = statuses or StatusRepository()
        self.categories = categories or CategoryRepository()
        self.users = users or UserRepository()

    def _status_id(self, status_name: str) -> int:
        return self.statuses.find_status_by_name(status_name).id

    def _owned_task(self, task_id: int, user_id: int) -> TaskView:
        """Load a task the user owns and may still change."""
        if not self.tasks.task_is_owned_by(task_id, user_id):
            logger.info("User %s denied access to task %s", user_id, task_id)
            raise ValidationError(NOT_FOUND_OR_UNAUTHORIZED)
        task = self.tasks.get_task(task_id)
        if task is None:
            raise NotFoundError(f"Task not found: {task_id}")
        if task.status_name == DELETED:
            raise ValidationError("Cannot modify deleted task")
        return task

    def _transition(self, task_id: int, user_id: int, status_name: str) -> None:
        self._owned_task(task_id, user_id)
        self.tasks.update_task_status(task_id, self._status_id(status_name))
        logger.info("Task %s -> %s by user %s", task_id, status_name, user_id)

    # mutations

    def add_task(self, name: str, owner_id: int, category_name: str) -> TaskOut:
        data = parse(TaskCreate, name=name or "", category_name=category_name or "")
        category = self.categories.find_category_by_name(data.category_name)
        ready = self._status_id(READY_TO_PICK)
        return self.tasks.create_task(data.name, ready, owner_id, category.id)

    def edit_task(self, task_id: int, new_name: str, user_id: int) -> None:
        """Rename a task; editing always puts it back in progress."""
        data = parse(TaskRename, name=new_name or "")
        self._owned_task(task_id, user_id)
        self.tasks.update_task_name_and_status(task_id, data.name, self._status_id(IN_PROGRESS))
        logger.info("Task %s renamed by user %s", task_id, user_id)

    def start_task(self, task_id: int, user_id: int) -> None:
        task = self._owned_task(task_id, user_id)
        if task.status_name not in STARTABLE:
            raise ValidationError(
                "Task can only be started from Ready to Pick or Blocked status"
            )
        self.tasks.update_task_status(task_id, self._status_id(IN_PROGRESS))
        logger.info("Task %s started by user %s", task_id, user_id)

    def mark_completed(self, task_id: int, user_id: int) -> None:
        self._transition(task_id, user_id, COMPLETED)

    def mark_blocked(self, task_id: int, user_id: int) -> None:
        self._transition(task_id, user_id, BLOCKED)

    def delete_task(self, task_id: int, user_id: int) -> None:
        # soft delete: the row stays, only its status changes
        self._transition(task_id, user_id, DELETED)

    def assign_task(self, task_id: int, assignee_id: int) -> None:
        """Hand a task to another user and put it in progress.

        No ownership check here; callers decide who may assign.
        """
        task = self.tasks.get_task(task_id)
        if task is None:
            raise NotFoundError(f"Task not found: {task_id}")
        if task.status_name == DELETED:
            raise ValidationError("Cannot modify deleted task")
        if self.users.find_user_by_id(assignee_id) is None:
            raise NotFoundError(f"User not found: {assignee_id}")
        self.tasks.update_task_owner_and_status(task_id, assignee_id, self._status_id(IN_PROGRESS))
        logger.info("Task %s assigned to user %s", task_id, assignee_id)

    # reads

    def get_task(self, task_id: int, user_id: int) -> TaskView:
        if not self.tasks.task_is_owned_by(task_id, user_id):
            raise ValidationError(NOT_FOUND_OR_UNAUTHORIZED)
        task = self.tasks.get_task(task_id)
        if task is None:
            raise NotFoundError(f"Task not found: {task_id}")
        return task

    def view_my_tasks(self, user_id: int) -> List[TaskView]:
        return self.tasks.list_tasks_by_owner(user_id)

    def get_active_tasks(self, user_id: int) -> List[TaskView]:
        return self.tasks.list_tasks_by_owner(user_id, exclude_statuses=[DELETED])

    def get_startable_tasks(self, user_id: int) -> List[TaskView]:
        return self.tasks.list_tasks_by_owner(user_id, only_statuses=STARTABLE)

    def filter_my_tasks_by_names(
        self,
        user_id: int,
        status_name: Optional[str] = None,
        category_name: Optional[str] = None,
    ) -> List[TaskView]:
        return self.tasks.list_tasks_by_owner_filtered(user_id, status_name, category_name)

    def list_categories(self) -> List[CategoryOut]:
        return self.categories.list_categories()

    def list_statuses(self) -> List[StatusOut]:
        return self.statuses.list_statuses()
