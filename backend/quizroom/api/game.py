from flask import Blueprint, current_app, jsonify

game = Blueprint('game', __name__)


@game.route('/state', methods=['GET'])
def get_round_state():
    coordinator = current_app.extensions['trivia']
    return jsonify({
        'round': coordinator.round_state(),
        'connected': coordinator.status()['connected'],
    })


@game.route('/scores', methods=['GET'])
def get_scores():
    standings = current_app.extensions['trivia'].standings()
    return jsonify({
        'ledger': dict(standings),
        'standings': [{'name': name, 'score': score} for name, score in standings],
    })
