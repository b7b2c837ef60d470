from typing import Optional
import time


class Session:
    """One live Socket.IO connection. Unnamed until it registers."""

    def __init__(self, sid: str):
        self.sid = sid
        self.name: Optional[str] = None
        self.is_moderator = False

    @property
    def is_registered(self) -> bool:
        return self.name is not None


class Round:
    """The single active question.

    ``answer_normalized`` is private to the server and is left out of
    every serialization.
    """

    def __init__(self):
        self.question_text = ''
        self.answer_normalized = ''
        self.is_active = False
        self.published_by: Optional[str] = None
        self.started_at: Optional[float] = None

    def publish(self, question_text: str, answer_normalized: str, published_by: str, started_at: float = None) -> None:
        self.question_text = question_text
        self.answer_normalized = answer_normalized
        self.published_by = published_by
        self.started_at = started_at if started_at is not None else time.time()
        self.is_active = True

    def close(self) -> None:
        self.question_text = ''
        self.answer_normalized = ''
        self.published_by = None
        self.started_at = None
        self.is_active = False

    def published_payload(self):
        return {
            'question_text': self.question_text,
            'started_at': self.started_at,
            'moderator_name': self.published_by,
        }

    def to_dict(self):
        return {
            'question_text': self.question_text,
            'is_active': self.is_active,
            'published_by': self.published_by,
            'started_at': self.started_at,
        }
