import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '5000'))
    # Comma separated list, or '*' for any origin
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/')
    # Completed lines needed to win
    LINES_TO_WIN = int(os.environ.get('LINES_TO_WIN', '5'))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    DEBUG = os.environ.get('FLASK_DEBUG', '0') == '1'
