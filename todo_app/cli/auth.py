import logging

from todo_app.cli.console import Console
from todo_app.cli.tasks import TaskMenu
from todo_app.errors import StorageError, ValidationError
from todo_app.services.auth import AuthService
from todo_app.services.tasks import TaskService

logger = logging.getLogger(__name__)


class AuthMenu:
    """Register / login / exit loop; a successful login opens the task menu."""

    def __init__(self, auth: AuthService, tasks: TaskService, console: Console = None):
        self.auth = auth
        self.tasks = tasks
        self.console = console or Console()

    def run(self) -> None:
        out = self.console.write
        out("Welcome to Collaborative To-Do Application!")
        while True:
            out("\n=== Collaborative To-Do ===")
            out("1) Register")
            out("2) Login")
            out("3) Exit")
            try:
                choice = self.console.read("Choose: ").strip()
            except (EOFError, KeyboardInterrupt):
                out()
                break

            if choice == "3":
                out("Goodbye!")
                break
            if choice not in ("1", "2"):
                out("Invalid choice.")
                continue

            try:
                if choice == "1":
                    self._register()
                else:
                    self._login()
            except ValidationError as e:
                out(f"Error: {e}")
                continue
            except StorageError as e:
                logger.exception("Authentication failed on the database side")
                out(f"Error: {e}")
                continue
            except (EOFError, KeyboardInterrupt):
                out()
                break

            try:
                TaskMenu(self.tasks, self.auth, self.console).run()
            except (EOFError, KeyboardInterrupt):
                self.auth.logout()
                out()
                break
            self.auth.logout()
            out("Logged out.")

    def _register(self) -> None:
        self.console.write("\n--- Register ---")
        name = self.console.read("Username: ")
        password = self.console.read_secret("Password: ")
        user = self.auth.register(name, password)
        self.console.write(f"Registration successful! Welcome, {user.name}!")

    def _login(self) -> None:
        self.console.write("\n--- Login ---")
        name = self.console.read("Username: ")
        password = self.console.read_secret("Password: ")
        user = self.auth.login(name, password)
        self.console.write(f"Welcome, {user.name}!")
