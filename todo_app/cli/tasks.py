import logging
from typing import List, Optional

from todo_app.cli.console import Console
from todo_app.errors import StorageError, ValidationError
from todo_app.schemas.task import TaskView

logger = logging.getLogger(__name__)

DATE_FMT = "%Y-%m-%d %H:%M:%S"


def format_task(t: TaskView) -> str:
    return (
        f"[{t.id}] {t.username} | {t.task_name} | "
        f"Status={t.status_name} | Category={t.category_name} | "
        f"Created={t.created_date:{DATE_FMT}} | Updated={t.updated_date:{DATE_FMT}}"
    )


def format_choice(i: int, t: TaskView) -> str:
    return f"{i}) {t.task_name} | Status={t.status_name} | Category={t.category_name}"


class TaskMenu:
    """Task actions for the logged-in user.

    Returns on logout. End of input and Ctrl-C propagate to the caller.
    """

    def __init__(self, tasks, auth, console: Console = None):
        self.tasks = tasks
        self.auth = auth
        self.console = console or Console()
        self._actions = {
            "1": self.add_task,
            "2": self.edit_task,
            "3": self.start_task,
            "4": self.mark_completed,
            "5": self.mark_blocked,
            "6": self.delete_task,
            "7": self.view_tasks,
            "8": self.filter_tasks,
            "9": self.assign_task,
        }

    @property
    def user(self):
        return self.auth.current_user

    def _menu(self) -> None:
        out = self.console.write
        out(f"\n=== Task Menu (User: {self.user.name}) ===")
        out("1) Add Task")
        out("2) Edit Task Name")
        out("3) Start/Resume Task")
        out("4) Mark Completed")
        out("5) Mark Blocked")
        out("6) Delete Task")
        out("7) View My Tasks")
        out("8) Filter My Tasks (by status name/category name)")
        out("9) Assign Task")
        out("0) Logout")

    def run(self) -> None:
        while self.auth.is_logged_in():
            self._menu()
            try:
                choice = self.console.read("Choose: ").strip()
                if choice == "0":
                    return
                action = self._actions.get(choice)
                if action is None:
                    self.console.write("Invalid option. Please choose 0-9.")
                    continue
                action()
            except ValidationError as e:
                self.console.write(f"Error: {e}")
            except StorageError as e:
                logger.exception("Task menu action failed on the database side")
                self.console.write(f"Error: {e}")

    def _pick(self, tasks: List[TaskView], title: str) -> Optional[TaskView]:
        out = self.console.write
        if not tasks:
            out("(No tasks found)")
            return None

        out(f"\n--- {title} ---")
        for i, t in enumerate(tasks, start=1):
            out(format_choice(i, t))

        raw = self.console.read(f"\nChoose task number (1-{len(tasks)}): ").strip()
        try:
            pick = int(raw)
        except ValueError:
            out("Invalid input. Please enter a number.")
            return None
        if pick < 1 or pick > len(tasks):
            out(f"Invalid choice. Please select between 1 and {len(tasks)}")
            return None
        return tasks[pick - 1]

    def _show(self, tasks: List[TaskView], title: str) -> None:
        self.console.write(f"\n--- {title} ---")
        if not tasks:
            self.console.write("(No tasks found)")
            return
        for t in tasks:
            self.console.write(format_task(t))

    def add_task(self) -> None:
        name = self.console.read("Task name: ").strip()
        if not name:
            raise ValidationError("Task name cannot be empty.")

        self.console.write("\nAvailable categories:")
        for c in self.tasks.list_categories():
            self.console.write(f" - {c.category_name}")
        category = self.console.read("\nCategory name (type exactly as above): ").strip()

        self.tasks.add_task(name, self.user.id, category)
        self.console.write("Task added successfully!")

    def edit_task(self) -> None:
        selected = self._pick(self.tasks.view_my_tasks(self.user.id), "My Tasks (choose a task to edit)")
        if selected is None:
            return
        self.console.write(f"Selected: {selected.task_name}")
        new_name = self.console.read("New task name: ")
        self.tasks.edit_task(selected.id, new_name, self.user.id)
        self.console.write("Task updated successfully!")

    def start_task(self) -> None:
        startable = self.tasks.get_startable_tasks(self.user.id)
        if not startable:
            self.console.write("(No startable tasks. Only ready_to_pick or blocked tasks can be started.)")
            return
        selected = self._pick(startable, "Start Task (Ready to Pick / Blocked)")
        if selected is None:
            return
        self.tasks.start_task(selected.id, self.user.id)
        self.console.write(f"Started: {selected.task_name} (Status set to in_progress)")

    def mark_completed(self) -> None:
        selected = self._pick(self.tasks.get_active_tasks(self.user.id), "Mark Completed")
        if selected is None:
            return
        self.tasks.mark_completed(selected.id, self.user.id)
        self.console.write(f"Marked completed: {selected.task_name}")

    def mark_blocked(self) -> None:
        selected = self._pick(self.tasks.get_active_tasks(self.user.id), "Mark Blocked")
        if selected is None:
            return
        self.tasks.mark_blocked(selected.id, self.user.id)
        self.console.write(f"Marked blocked: {selected.task_name}")

    def delete_task(self) -> None:
        selected = self._pick(self.tasks.get_active_tasks(self.user.id), "Delete Task")
        if selected is None:
            return
        confirm = self.console.read(
            f"Are you sure you want to delete '{selected.task_name}'? (y/n): "
        ).strip().lower()
        if confirm != "y":
            self.console.write("Cancelled.")
            return
        self.tasks.delete_task(selected.id, self.user.id)
        self.console.write(f"Task deleted (soft delete): {selected.task_name}")

    def assign_task(self) -> None:
        selected = self._pick(self.tasks.get_active_tasks(self.user.id), "Assign Task")
        if selected is None:
            return
        assignee = self.auth.find_user(self.console.read("Assign to username: "))
        self.tasks.assign_task(selected.id, assignee.id)
        self.console.write(f"Assigned '{selected.task_name}' to {assignee.name}")

    def view_tasks(self) -> None:
        self._show(self.tasks.view_my_tasks(self.user.id), "My Tasks")

    def filter_tasks(self) -> None:
        names = ", ".join(s.status_name for s in self.tasks.list_statuses())
        status = self.console.read(f"status name ({names}) (press Enter to skip): ").strip()
        names = ", ".join(c.category_name for c in self.tasks.list_categories())
        category = self.console.read(f"category name ({names}) (press Enter to skip): ").strip()

        tasks = self.tasks.filter_my_tasks_by_names(self.user.id, status or None, category or None)
        self._show(tasks, "Filtered Tasks")
