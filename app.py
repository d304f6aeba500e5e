"""WSGI entry point: ``gunicorn app:app`` or ``flask --app app run``."""

from src.attendance_tracker.attendance_tracker.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(port=int(app.config.get("PORT", 3001)), debug=bool(app.config.get("DEBUG")))
