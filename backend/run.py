from hub import create_app, socketio

app = create_app()

if __name__ == '__main__':
    # Werkzeug refuses to serve outside debug mode unless told otherwise
    socketio.run(
        app,
        host=app.config['HOST'],
        port=app.config['PORT'],
        allow_unsafe_werkzeug=True,
    )
