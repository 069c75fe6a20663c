"""ASGI entrypoint for the FitIn API."""

from fitin.api.app import create_app
from fitin.containers import build_container

app = create_app(build_container())
