"""
Entry point for Flask.

Usage (from project root):

    flask --app run.py init-db
    flask --app run.py seed-products
    flask --app run.py --debug run

Production (any WSGI server), e.g.:

    gunicorn "run:app" -w 4 -b 0.0.0.0:8000

"""

from catalog import create_app

# WSGI application object. `flask run` and WSGI servers look for this `app` variable.
app = create_app()

if __name__ == "__main__":
    # For direct `python run.py` usage (dev only) - use `flask run` or a WSGI server instead.
    app.run(debug=True)
