"""Commit-message editing sessions and their setup hooks."""

from .config import DEFAULT_FILL_COLUMN
from .resolver import apply, extract_project_name, format_notice


class CommitSession:
    """Session-local state for editing a single commit message."""

    def __init__(self, message_path=None, fill_column=DEFAULT_FILL_COLUMN):
        self.message_path = message_path
        self.fill_column = fill_column
        self.notices = []

    def set_fill_column(self, width):
        self.fill_column = width

    def notify(self, message):
        self.notices.append(message)


class CommitSessionHooks:
    """Ordered callbacks run when a commit-message session starts."""

    def __init__(self, callbacks=None):
        self._callbacks = list(callbacks or [])

    def register(self, callback):
        if callback not in self._callbacks:
            self._callbacks.append(callback)
        return callback

    def run(self, session):
        for callback in self._callbacks:
            callback(session)
        return session

    def __len__(self):
        return len(self._callbacks)


def project_fill_column_hook(mapping, remote_url_getter=None):
    """
    Build a session hook that sets the fill column for the current project.

    `remote_url_getter` returns the origin URL or None; it defaults to
    reading git config. Unresolved projects leave the session untouched.
    """
    if remote_url_getter is None:
        # Import lazily so tests can monkeypatch `commit_fill.get_remote_url`.
        import commit_fill as cf

        remote_url_getter = cf.get_remote_url

    def _hook(session):
        remote_url = remote_url_getter()
        width = apply(remote_url, mapping)
        if width is None:
            return
        session.set_fill_column(width)
        session.notify(format_notice(width, extract_project_name(remote_url)))

    return _hook
