"""ASGI entrypoint for the tracker API."""

from vitality_tracker.api.app import create_app
from vitality_tracker.containers import build_container

app = create_app(build_container())
