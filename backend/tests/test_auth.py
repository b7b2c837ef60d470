from quizroom import bcrypt, create_app
from quizroom.auth import is_moderator_key

from conftest import MODERATOR_KEY, TestConfig as BaseConfig


def test_configured_passcode_is_hashed_at_startup(flask_app):
    stored = flask_app.config['MODERATOR_PASSCODE_HASH']
    assert stored and stored != MODERATOR_KEY
    assert is_moderator_key(MODERATOR_KEY)
    assert not is_moderator_key('nope')
    assert not is_moderator_key(None)
    assert not is_moderator_key(1234)


def test_precomputed_hash_takes_precedence(flask_app):
    class HashedConfig(BaseConfig):
        MODERATOR_PASSCODE = 'ignored'
        MODERATOR_PASSCODE_HASH = bcrypt.generate_password_hash('from-hash').decode('utf-8')

    hashed_app = create_app(HashedConfig)
    with hashed_app.app_context():
        assert is_moderator_key('from-hash')
        assert not is_moderator_key('ignored')


def test_invalid_hash_denies_everyone():
    class BrokenConfig(BaseConfig):
        MODERATOR_PASSCODE_HASH = 'not-a-bcrypt-hash'

    broken_app = create_app(BrokenConfig)
    with broken_app.app_context():
        assert not is_moderator_key(MODERATOR_KEY)


def test_no_passcode_means_no_moderator():
    class OpenConfig(BaseConfig):
        MODERATOR_PASSCODE = None
        MODERATOR_PASSCODE_HASH = None

    open_app = create_app(OpenConfig)
    with open_app.app_context():
        assert not open_app.config.get('MODERATOR_PASSCODE_HASH')
        assert not is_moderator_key(MODERATOR_KEY)
        assert not is_moderator_key('')


def test_shipped_config_has_no_default_passcode(monkeypatch):
    import importlib
    import config

    monkeypatch.delenv('MODERATOR_PASSCODE', raising=False)
    monkeypatch.delenv('MODERATOR_PASSCODE_HASH', raising=False)
    reloaded = importlib.reload(config)
    try:
        assert reloaded.Config.MODERATOR_PASSCODE is None
        assert reloaded.Config.MODERATOR_PASSCODE_HASH is None
    finally:
        importlib.reload(config)
