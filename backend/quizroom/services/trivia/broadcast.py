from typing import Any, Dict, List, Optional


class SocketIOBroadcaster:
    """Deliver events through Flask-SocketIO.

    ``to=None`` reaches every socket on the namespace; otherwise only the
    given sid.
    """

    def __init__(self, socketio, namespace: str = '/ws'):
        self.socketio = socketio
        self.namespace = namespace

    def emit(self, event: str, payload: Dict[str, Any], to: Optional[str] = None) -> None:
        if to is None:
            self.socketio.emit(event, payload, namespace=self.namespace)
        else:
            self.socketio.emit(event, payload, to=to, namespace=self.namespace)


class RecordingBroadcaster:
    """Keeps every emitted event in order. Used by tests and dry runs."""

    def __init__(self):
        self.sent: List[Dict[str, Any]] = []

    def emit(self, event: str, payload: Dict[str, Any], to: Optional[str] = None) -> None:
        self.sent.append({'event': event, 'payload': payload, 'to': to})

    def events(self, to: Optional[str] = None, broadcast_only: bool = False) -> List[str]:
        return [m['event'] for m in self.sent if self._matches(m, to, broadcast_only)]

    def last(self, event: str) -> Optional[Dict[str, Any]]:
        for message in reversed(self.sent):
            if message['event'] == event:
                return message
        return None

    def all(self, event: str) -> List[Dict[str, Any]]:
        return [m for m in self.sent if m['event'] == event]

    def clear(self) -> None:
        self.sent.clear()

    @staticmethod
    def _matches(message, to, broadcast_only) -> bool:
        if broadcast_only:
            return message['to'] is None
        if to is not None:
            return message['to'] == to
        return True
