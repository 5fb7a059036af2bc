from todo_app.database import session_scope


class BaseRepository:
    """Holds the session factory; every public method runs in its own scope.

    Without a factory the configured default database is used.
    """

    def __init__(self, session_factory=None):
        self._session_factory = session_factory

    def _session(self):
        return session_scope(self._session_factory)
