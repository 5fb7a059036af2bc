import logging
from contextlib import contextmanager

from sqlalchemy import create_engine, select
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker, declarative_base

from todo_app.config import DATABASE_URL, DATABASE_USER, DATABASE_PASSWORD
from todo_app.errors import StorageError

logger = logging.getLogger(__name__)

Base = declarative_base()


def resolve_url(url: str, user=None, password=None):
    """Apply optional credentials onto a database URL."""
    parsed = make_url(url)
    if user:
        parsed = parsed.set(username=user)
    if password:
        parsed = parsed.set(password=password)
    return parsed


def make_engine(url: str = DATABASE_URL, user=DATABASE_USER, password=DATABASE_PASSWORD):
    """Build an engine; a malformed URL or a missing driver becomes StorageError."""
    try:
        resolved = resolve_url(url, user, password)
        # Only apply sqlite-specific connect_args when using sqlite
        connect_args = {"check_same_thread": False} if resolved.drivername.startswith("sqlite") else {}
        # pool_pre_ping avoids handing out connections the server already dropped
        return create_engine(resolved, connect_args=connect_args, pool_pre_ping=True)
    except (ArgumentError, ImportError) as exc:
        raise StorageError(f"Unusable database URL: {exc}") from exc


def make_session_factory(bind):
    # expire_on_commit=False so rows stay readable after the scope closes
    return sessionmaker(bind=bind, autocommit=False, autoflush=False, expire_on_commit=False)


# Bound on first use so importing never needs a working DATABASE_URL
SessionLocal = make_session_factory(None)

_engine = None


def get_engine():
    """The engine for the configured DATABASE_URL, created on first call."""
    global _engine
    if _engine is None:
        _engine = make_engine()
        SessionLocal.configure(bind=_engine)
    return _engine


def default_session_factory():
    get_engine()
    return SessionLocal


@contextmanager
def session_scope(factory=None):
    """Run one unit of work: commit on success, roll back on error, always close.

    Database failures are re-raised as StorageError so callers only ever deal
    with the application's own error types.
    """
    db = (factory or default_session_factory())()
    try:
        yield db
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Database operation failed: %s", exc)
        raise StorageError("Database error, please try again later") from exc
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def init_db(bind=None):
    """Create the tables and seed the status/category lookup rows when missing."""
    # models must be imported so their tables are registered on Base.metadata
    from todo_app.models.category import Category
    from todo_app.models.status import Status
    from todo_app.models.user import User  # noqa: F401
    from todo_app.models.task import Task  # noqa: F401
    from todo_app.config import DEFAULT_CATEGORIES, DEFAULT_STATUSES

    bind = bind if bind is not None else get_engine()
    try:
        Base.metadata.create_all(bind=bind)
    except SQLAlchemyError as exc:
        raise StorageError("Could not create the database schema") from exc

    factory = make_session_factory(bind)
    with session_scope(factory) as db:
        existing = set(db.scalars(select(Status.status_name)))
        for name, label in DEFAULT_STATUSES:
            if name not in existing:
                db.add(Status(status_name=name, display_name=label))
                logger.info("Seeded status %s", name)

        existing = set(db.scalars(select(Category.category_name)))
        for name, label in DEFAULT_CATEGORIES:
            if name not in existing:
                db.add(Category(category_name=name, display_name=label))
                logger.info("Seeded category %s", name)
