"""Trivia round coordination: registry, score ledger, arbitration.

Nothing in this package touches Flask or Socket.IO directly. Socket
handlers and HTTP routes call into :class:`TriviaCoordinator`, which
reports outcomes through a broadcaster object.
"""

from .coordinator import TriviaCoordinator, normalize_answer
from .errors import (
    TriviaError,
    UnregisteredSession,
    RoundAlreadyClosed,
    ValidationError,
    Unauthorized,
)

__all__ = [
    'TriviaCoordinator',
    'normalize_answer',
    'TriviaError',
    'UnregisteredSession',
    'RoundAlreadyClosed',
    'ValidationError',
    'Unauthorized',
]
