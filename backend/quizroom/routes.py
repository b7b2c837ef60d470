from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify

main = Blueprint('main', __name__)

@main.route('/')
def index():
    return jsonify({
        'message': 'Quizroom trivia server is running',
        'endpoints': {
            'health': '/health',
            'state': '/api/game/state',
            'scores': '/api/game/scores',
            'socket': current_app.config.get('SOCKETIO_NAMESPACE', '/ws'),
        },
    })

@main.route('/health')
def health():
    status = current_app.extensions['trivia'].status()
    return jsonify({
        'status': 'OK',
        'timestamp': datetime.now(timezone.utc).isoformat(),
        **status,
    })
