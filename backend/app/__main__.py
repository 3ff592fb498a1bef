"""Allow `python -m app` to start the server."""

from app.main import run

run()
