from functools import wraps

from flask import current_app, request
from flask_socketio import emit

from quizroom import socketio
from quizroom.auth import is_moderator_key
from quizroom.services.trivia import TriviaCoordinator, TriviaError


def _coordinator() -> TriviaCoordinator:
    return current_app.extensions['trivia']

def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore

def _reply_errors(handler):
    """Turn a rejected request into a private event for the sender."""
    @wraps(handler)
    def wrapper(*args, **kwargs):
        try:
            return handler(*args, **kwargs)
        except TriviaError as exc:
            current_app.logger.info(f"[reject] sid={_get_sid()} code={exc.code} message={exc.message}")
            emit(exc.event, exc.to_dict())
    return wrapper


def handle_connect(auth=None):
    _coordinator().connect(_get_sid())


def handle_disconnect(reason=None):
    _coordinator().disconnect(_get_sid())


@_reply_errors
def handle_register(data=None):
    # Plain string payloads carry only the display name
    if isinstance(data, dict):
        name = data.get('name')
        moderator = is_moderator_key(data.get('moderator_key'))
    else:
        name = data
        moderator = False
    _coordinator().register(_get_sid(), name, is_moderator=moderator)


@_reply_errors
def handle_publish_question(data=None):
    data = data if isinstance(data, dict) else {}
    _coordinator().publish_question(_get_sid(), data.get('question_text'), data.get('answer_text'))


@_reply_errors
def handle_submit_answer(data=None):
    text = data.get('text') if isinstance(data, dict) else data
    _coordinator().submit_answer(_get_sid(), text)


@_reply_errors
def handle_reset_game(data=None):
    _coordinator().reset_game(_get_sid())


def register_socketio_handlers(namespace: str = '/ws') -> None:
    """Bind the trivia event handlers to ``namespace``."""
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event('register', handle_register, namespace=namespace)
    socketio.on_event('publish-question', handle_publish_question, namespace=namespace)
    socketio.on_event('submit-answer', handle_submit_answer, namespace=namespace)
    socketio.on_event('reset-game', handle_reset_game, namespace=namespace)
