from typing import Dict, Optional

from quizroom.models import Session


class ConnectionRegistry:
    """sid -> Session bookkeeping for connected sockets."""

    def __init__(self):
        self._sessions: Dict[str, Session] = {}

    def connect(self, sid: str) -> Session:
        session = self._sessions.get(sid)
        if session is None:
            session = Session(sid)
            self._sessions[sid] = session
        return session

    def register(self, sid: str, name: str, is_moderator: bool = False) -> Session:
        # Sockets that skipped the connect hook still get a session
        session = self.connect(sid)
        session.name = name
        session.is_moderator = is_moderator
        return session

    def disconnect(self, sid: str) -> Optional[Session]:
        return self._sessions.pop(sid, None)

    def get(self, sid: str) -> Optional[Session]:
        return self._sessions.get(sid)

    def name_for(self, sid: str) -> Optional[str]:
        session = self._sessions.get(sid)
        return session.name if session else None

    @property
    def registered_count(self) -> int:
        return sum(1 for s in self._sessions.values() if s.is_registered)

    def __len__(self) -> int:
        return len(self._sessions)
