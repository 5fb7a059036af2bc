import argparse
import logging
import sys

from todo_app import config
from todo_app.cli.auth import AuthMenu
from todo_app.cli.console import Console
from todo_app.database import init_db, make_engine, make_session_factory
from todo_app.errors import StorageError
from todo_app.logging_setup import setup_logging
from todo_app.repositories.category import CategoryRepository
from todo_app.repositories.status import StatusRepository
from todo_app.repositories.task import TaskRepository
from todo_app.repositories.user import UserRepository
from todo_app.services.auth import AuthService
from todo_app.services.session import UserSession
from todo_app.services.tasks import TaskService

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="todo-app",
        description="Collaborative To-Do - multi-user task tracker",
    )
    parser.add_argument("--database-url", default=config.DATABASE_URL, help="SQLAlchemy database URL")
    parser.add_argument("--init-db", action="store_true", help="Create tables and seed lookups, then exit")
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help="Console log level (default: %(default)s)")
    parser.add_argument("--log-file", default=config.LOG_FILE, help="Also write DEBUG logs to this file")
    return parser


def build_app(session_factory, console=None):
    """Wire repositories, services and the auth menu around one session factory."""
    users = UserRepository(session_factory)
    auth = AuthService(users, UserSession())
    tasks = TaskService(
        TaskRepository(session_factory),
        StatusRepository(session_factory),
        CategoryRepository(session_factory),
        users,
    )
    return AuthMenu(auth, tasks, console or Console())


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    try:
        engine = make_engine(args.database_url)
        init_db(engine)
    except StorageError:
        logger.exception("Could not prepare the database")
        print("Error: could not connect to the database.", file=sys.stderr)
        return 1

    if args.init_db:
        print("Database ready.")
        return 0

    try:
        build_app(make_session_factory(engine)).run()
    finally:
        engine.dispose()
    return 0


if __name__ == "__main__":
    sys.exit(main())
