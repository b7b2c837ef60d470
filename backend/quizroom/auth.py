"""Moderator credential check.

Moderator standing is granted at registration to sockets that present the
configured passcode. The passcode is only ever compared against a bcrypt
hash.
"""
from flask import current_app

from quizroom import bcrypt


def init_moderator_credential(flask_app) -> None:
    """Store a bcrypt hash of the moderator passcode on the app config."""
    if flask_app.config.get('MODERATOR_PASSCODE_HASH'):
        return
    passcode = flask_app.config.get('MODERATOR_PASSCODE')
    if not passcode:
        flask_app.logger.warning("[auth] no moderator passcode configured; nobody can moderate")
        return
    flask_app.config['MODERATOR_PASSCODE_HASH'] = bcrypt.generate_password_hash(passcode).decode('utf-8')


def is_moderator_key(candidate) -> bool:
    if not candidate or not isinstance(candidate, str):
        return False
    stored = current_app.config.get('MODERATOR_PASSCODE_HASH')
    if not stored:
        return False
    try:
        return bcrypt.check_password_hash(stored, candidate)
    except ValueError:
        current_app.logger.warning("[auth] MODERATOR_PASSCODE_HASH is not a valid bcrypt hash")
        return False
