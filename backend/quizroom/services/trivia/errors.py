from typing import Dict


class TriviaError(Exception):
    """Base for rejections reported privately to the originating session."""

    code = 'trivia_error'
    event = 'error'
    default_message = 'Request rejected'

    def __init__(self, message: str = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    def to_dict(self) -> Dict[str, str]:
        return {'code': self.code, 'message': self.message}


class UnregisteredSession(TriviaError):
    code = 'unregistered_session'
    event = 'unregistered-session'
    default_message = 'Register a name before answering'


class RoundAlreadyClosed(TriviaError):
    # Covers both "no question yet" and "already won or reset"
    code = 'round_already_closed'
    event = 'round-already-closed'
    default_message = 'The round has already ended'


class ValidationError(TriviaError):
    code = 'validation_error'
    event = 'validation-error'
    default_message = 'Invalid input'


class Unauthorized(TriviaError):
    code = 'unauthorized'
    event = 'unauthorized'
    default_message = 'Moderator standing required'
