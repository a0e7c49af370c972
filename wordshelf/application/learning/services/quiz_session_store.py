"""Process-local store for running quiz sessions."""

import threading
from datetime import UTC, datetime, timedelta

import structlog

from wordshelf.domain.common.value_objects.ids import UserId
from wordshelf.domain.learning.entities import QuizSession

logger = structlog.get_logger(__name__)


class QuizSessionStore:
    """
    Keeps quiz sessions in memory, keyed by session id.

    Sessions are only visible to the user who started them and are dropped
    once idle for longer than the timeout. Sync routes run in a threadpool,
    so every access to the mapping goes through one lock.
    """

    def __init__(self, timeout_minutes: int) -> None:
        self.timeout = timedelta(minutes=timeout_minutes)
        self._sessions: dict[str, QuizSession] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def add(self, session: QuizSession) -> QuizSession:
        self.purge_expired()
        with self._lock:
            self._sessions[session.id] = session
        return session

    def get(self, session_id: str, user_id: UserId) -> QuizSession | None:
        """Return the session if it exists, belongs to user_id and has not expired."""
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None or session.user_id != user_id:
                return None
            expired = session.is_expired(self.timeout)
            if expired:
                self._sessions.pop(session_id, None)
            else:
                session.touch()

        if expired:
            logger.info("quiz_session_expired", session_id=session_id)
            return None
        return session

    def remove(self, session_id: str, user_id: UserId) -> bool:
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None or session.user_id != user_id:
                return False
            del self._sessions[session_id]
            return True

    def purge_expired(self, now: datetime | None = None) -> int:
        now = now or datetime.now(UTC)
        with self._lock:
            expired = [
                session_id
                for session_id, session in self._sessions.items()
                if session.is_expired(self.timeout, now)
            ]
            for session_id in expired:
                del self._sessions[session_id]
        if expired:
            logger.info("quiz_sessions_purged", count=len(expired))
        return len(expired)

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()
