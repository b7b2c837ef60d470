import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Comma separated list of allowed browser origins
    CORS_ORIGINS = [o.strip() for o in (os.environ.get('CORS_ORIGINS') or 'http://localhost:3000,http://127.0.0.1:3000').split(',') if o.strip()]
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE') or '/ws'
    # Moderator credential presented at registration. A precomputed bcrypt hash wins over the plain passcode.
    MODERATOR_PASSCODE = os.environ.get('MODERATOR_PASSCODE')
    MODERATOR_PASSCODE_HASH = os.environ.get('MODERATOR_PASSCODE_HASH')
    BCRYPT_LOG_ROUNDS = int(os.environ.get('BCRYPT_LOG_ROUNDS', '12'))
    # Input bounds
    MAX_NAME_LENGTH = int(os.environ.get('MAX_NAME_LENGTH', '20'))
    MAX_QUESTION_LENGTH = int(os.environ.get('MAX_QUESTION_LENGTH', '200'))
    MAX_ANSWER_LENGTH = int(os.environ.get('MAX_ANSWER_LENGTH', '50'))
