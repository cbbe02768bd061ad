from bingo import create_app, socketio

app = create_app()

if __name__ == '__main__':
    # Werkzeug dev server unless eventlet/gevent is installed
    socketio.run(
        app,
        host=app.config['HOST'],
        port=app.config['PORT'],
        debug=app.config['DEBUG'],
        allow_unsafe_werkzeug=True,
    )
