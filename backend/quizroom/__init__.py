from flask import Flask
from flask_bcrypt import Bcrypt
from flask_cors import CORS
from flask_socketio import SocketIO
import click
from config import Config

bcrypt = Bcrypt()
socketio = SocketIO(async_mode=None)

def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    allowed_origins = flask_app.config.get('CORS_ORIGINS') or []
    namespace = flask_app.config.get('SOCKETIO_NAMESPACE', '/ws')

    bcrypt.init_app(flask_app)
    CORS(flask_app, origins=allowed_origins)
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    from quizroom.auth import init_moderator_credential
    init_moderator_credential(flask_app)

    # One coordinator per app; handlers and routes reach it through app.extensions
    from quizroom.services.trivia import TriviaCoordinator
    from quizroom.services.trivia.broadcast import SocketIOBroadcaster
    flask_app.extensions['trivia'] = TriviaCoordinator.from_config(
        flask_app.config,
        SocketIOBroadcaster(socketio, namespace=namespace),
        logger=flask_app.logger,
    )

    from quizroom.routes import main
    flask_app.register_blueprint(main)

    from quizroom.api.game import game
    flask_app.register_blueprint(game, url_prefix='/api/game')

    from quizroom.socketio_events import register_socketio_handlers
    register_socketio_handlers(namespace=namespace)

    @click.command('hash-passcode')
    @click.argument('passcode')
    def hash_passcode_command(passcode):
        """Print a bcrypt hash to use as MODERATOR_PASSCODE_HASH."""
        click.echo(bcrypt.generate_password_hash(passcode).decode('utf-8'))

    @click.command('show-scores')
    def show_scores_command():
        """Print the in-memory standings of this process."""
        standings = flask_app.extensions['trivia'].standings()
        if not standings:
            click.echo('No scores yet.')
            return
        for name, score in standings:
            click.echo(f'{name}: {score}')

    flask_app.cli.add_command(hash_passcode_command)
    flask_app.cli.add_command(show_scores_command)

    return flask_app
