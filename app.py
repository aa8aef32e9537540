"""WSGI entry point.

Run with ``flask --app app run`` or any WSGI server pointing at ``app:app``.
"""

from contactdesk import create_app

app = create_app()


if __name__ == '__main__':
    app.run(debug=app.config.get('DEBUG', False))
