from flask import Blueprint, current_app, jsonify

main = Blueprint('main', __name__)


@main.route('/')
def index():
    return jsonify({'message': 'Bingo server is running', 'status': 'ok'})


@main.route('/health')
def health():
    registry = current_app.extensions['bingo'].registry
    return jsonify({'status': 'healthy', 'rooms': len(registry)})
