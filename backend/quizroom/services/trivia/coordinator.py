import logging
import threading
import time
from typing import Any, Callable, Dict, Optional

from quizroom.models import Round, Session
from .errors import RoundAlreadyClosed, Unauthorized, UnregisteredSession, ValidationError
from .ledger import ScoreLedger
from .registry import ConnectionRegistry


def normalize_answer(text: str) -> str:
    """Lower-case and trim. Inner whitespace and accents are left alone."""
    return text.lower().strip()


def _clean_text(value: Any, field: str, max_length: int) -> str:
    if not isinstance(value, str):
        raise ValidationError(f'{field} must be a string')
    cleaned = value.strip()
    if not cleaned:
        raise ValidationError(f'{field} is required')
    if len(cleaned) > max_length:
        raise ValidationError(f'{field} must be at most {max_length} characters')
    return cleaned


class TriviaCoordinator:
    """Owns the round, the score ledger and the connection registry.

    Every operation that reads or mutates shared state runs under one
    re-entrant lock, and the broadcasts it produces are emitted before the
    lock is released. Two correct submissions can therefore never both see
    an active round, and listeners observe events in processing order.
    """

    def __init__(
        self,
        broadcaster,
        logger: Optional[logging.Logger] = None,
        max_name_length: int = 20,
        max_question_length: int = 200,
        max_answer_length: int = 50,
        clock: Callable[[], float] = time.time,
    ):
        self.broadcaster = broadcaster
        self.logger = logger or logging.getLogger(__name__)
        self.max_name_length = max_name_length
        self.max_question_length = max_question_length
        self.max_answer_length = max_answer_length
        self.clock = clock

        self.registry = ConnectionRegistry()
        self.ledger = ScoreLedger()
        self.round = Round()
        self._lock = threading.RLock()

    @classmethod
    def from_config(cls, config, broadcaster, logger=None) -> 'TriviaCoordinator':
        return cls(
            broadcaster,
            logger=logger,
            max_name_length=int(config.get('MAX_NAME_LENGTH', 20)),
            max_question_length=int(config.get('MAX_QUESTION_LENGTH', 200)),
            max_answer_length=int(config.get('MAX_ANSWER_LENGTH', 50)),
        )

    # ---- Connection lifecycle ----

    def connect(self, sid: str) -> None:
        with self._lock:
            self.registry.connect(sid)
            self.broadcaster.emit('scores-updated', self._scores_payload(), to=sid)
            self.logger.info(f"[connect] sid={sid} sessions={len(self.registry)}")

    def register(self, sid: str, name: Any, is_moderator: bool = False) -> Session:
        name = _clean_text(name, 'name', self.max_name_length)
        with self._lock:
            session = self.registry.register(sid, name, is_moderator=is_moderator)
            self.ledger.ensure_entry(name)
            total = self.registry.registered_count
            self.logger.info(f"[register] sid={sid} name={name} moderator={is_moderator} total={total}")

            self.broadcaster.emit('registered', {'name': name, 'is_moderator': is_moderator}, to=sid)
            self.broadcaster.emit('participant-joined', {'name': name, 'total_connected': total})
            if self.round.is_active:
                # Late joiners see the live question, never the answer
                self.broadcaster.emit('question-published', self.round.published_payload(), to=sid)
            return session

    def disconnect(self, sid: str) -> None:
        with self._lock:
            session = self.registry.disconnect(sid)
            if not session or not session.is_registered:
                return
            total = self.registry.registered_count
            self.logger.info(f"[disconnect] sid={sid} name={session.name} total={total}")
            self.broadcaster.emit('participant-left', {'name': session.name, 'total_connected': total})

    # ---- Round management ----

    def publish_question(self, sid: str, question_text: Any, answer_text: Any) -> None:
        with self._lock:
            moderator = self._require_moderator(sid)
            question = _clean_text(question_text, 'question_text', self.max_question_length)
            answer = normalize_answer(_clean_text(answer_text, 'answer_text', self.max_answer_length))

            if self.round.is_active:
                self.logger.info(f"[publish] replacing unanswered question from {self.round.published_by}")
            self.round.publish(question, answer, moderator.name, started_at=self.clock())
            self.logger.info(f"[publish] moderator={moderator.name} question={question!r}")
            self.broadcaster.emit('question-published', self.round.published_payload())

    def reset_game(self, sid: str) -> None:
        with self._lock:
            moderator = self._require_moderator(sid)
            self.round.close()
            self.ledger.clear()
            self.logger.info(f"[reset] by={moderator.name}")
            self.broadcaster.emit('game-reset', {
                'message': 'The game has been reset',
                'timestamp': self.clock(),
            })

    # ---- Arbitration ----

    def submit_answer(self, sid: str, raw_text: Any) -> bool:
        """Resolve one submission against the active round.

        Returns True when the submission won the round. Rejections raise a
        :class:`TriviaError`; a wrong answer is answered privately and
        returns False.
        """
        with self._lock:
            name = self.registry.name_for(sid)
            if not name:
                raise UnregisteredSession()
            if not self.round.is_active:
                raise RoundAlreadyClosed()
            if not isinstance(raw_text, str):
                raise ValidationError('answer must be a string')

            if normalize_answer(raw_text) != self.round.answer_normalized:
                self.broadcaster.emit('answer-incorrect', {
                    'submitted_text': raw_text,
                    'message': 'Incorrect answer, keep trying!',
                }, to=sid)
                return False

            correct_answer = self.round.answer_normalized
            self.round.close()
            new_score = self.ledger.increment(name)
            self.logger.info(f"[round-won] winner={name} score={new_score}")

            self.broadcaster.emit('round-won', {
                'winner_name': name,
                'correct_answer': correct_answer,
                'new_score': new_score,
                'timestamp': self.clock(),
            })
            self.broadcaster.emit('scores-updated', self._scores_payload())
            return True

    # ---- Read-only views ----

    def status(self) -> Dict[str, Any]:
        with self._lock:
            return {
                'connected': self.registry.registered_count,
                'round_active': self.round.is_active,
                'question_present': bool(self.round.question_text),
            }

    def round_state(self) -> Dict[str, Any]:
        with self._lock:
            return self.round.to_dict()

    def standings(self):
        with self._lock:
            return self.ledger.snapshot()

    # ---- helpers ----

    def _require_moderator(self, sid: str) -> Session:
        session = self.registry.get(sid)
        if not session or not session.is_registered:
            raise Unauthorized('Register as a moderator first')
        if not session.is_moderator:
            raise Unauthorized()
        return session

    def _scores_payload(self) -> Dict[str, Dict[str, int]]:
        return {'ledger': self.ledger.as_dict()}
