"""
In-memory registry of open study sessions for the HTTP layer.

Sessions idle for longer than the timeout are dropped, and when the registry
is full the least recently used session makes room for a new one.
"""
import logging
import time
from collections import OrderedDict
from typing import Callable, Optional
from uuid import UUID
from rekard.services.deck_store import DeckStore
from rekard.services.study_session import StudySession

logger = logging.getLogger(__name__)


class SessionRegistry:
    def __init__(
        self,
        store: DeckStore,
        max_sessions: int = 100,
        idle_timeout: float = 3600,
        clock: Callable[[], float] = time.monotonic
    ):
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self.store = store
        self.max_sessions = max_sessions
        self.idle_timeout = idle_timeout
        self.clock = clock
        # Least recently used first
        self._sessions: "OrderedDict[UUID, StudySession]" = OrderedDict()
        self._last_used = {}

    def open(self, deck_id: UUID, box: int) -> StudySession:
        """Create and start a session; finished sessions close themselves."""
        self._expire_idle()
        while len(self._sessions) >= self.max_sessions:
            oldest_id = next(iter(self._sessions))
            self.close(oldest_id)
            logger.info(f"Evicted study session {oldest_id} to stay under {self.max_sessions} open sessions")

        session = StudySession(self.store, deck_id, box, on_finished=self._on_finished)
        self._sessions[session.session_id] = session
        self._last_used[session.session_id] = self.clock()
        session.start()
        return session

    def get(self, session_id: UUID) -> Optional[StudySession]:
        """Look up an open session and mark it as used."""
        self._expire_idle()
        session = self._sessions.get(session_id)
        if session is not None:
            self._sessions.move_to_end(session_id)
            self._last_used[session_id] = self.clock()
        return session

    def close(self, session_id: UUID) -> bool:
        self._last_used.pop(session_id, None)
        return self._sessions.pop(session_id, None) is not None

    def __len__(self):
        return len(self._sessions)

    def _expire_idle(self):
        cutoff = self.clock() - self.idle_timeout
        expired = [sid for sid, used in self._last_used.items() if used <= cutoff]
        for session_id in expired:
            self.close(session_id)
            logger.info(f"Expired idle study session {session_id}")

    def _on_finished(self, session: StudySession):
        if self.close(session.session_id):
            logger.info(f"Closed finished study session {session.session_id}")
