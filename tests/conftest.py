import pytest

from fakes import unique_name

from todo_app.database import Base, init_db, make_engine, make_session_factory
from todo_app.repositories.category import CategoryRepository
from todo_app.repositories.status import StatusRepository
from todo_app.repositories.task import TaskRepository
from todo_app.repositories.user import UserRepository
from todo_app.services.auth import AuthService
from todo_app.services.session import UserSession
from todo_app.services.tasks import TaskService


# Fresh SQLite file per test; tables and lookup rows recreated every time
@pytest.fixture
def engine(tmp_path):
    eng = make_engine(f"sqlite:///{tmp_path / 'todo_test.db'}")
    init_db(eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return make_session_factory(engine)


@pytest.fixture
def users(session_factory):
    return UserRepository(session_factory)


@pytest.fixture
def task_repo(session_factory):
    return TaskRepository(session_factory)


@pytest.fixture
def auth(users):
    return AuthService(users, UserSession())


@pytest.fixture
def tasks(session_factory, users, task_repo):
    return TaskService(
        task_repo,
        StatusRepository(session_factory),
        CategoryRepository(session_factory),
        users,
    )


@pytest.fixture
def user(users):
    return users.create_user(unique_name(), "pw123")


@pytest.fixture
def other_user(users):
    return users.create_user(unique_name("other"), "pw456")
