"""ASGI entrypoint for the FlexLog API."""

from flexlog.api.app import create_app
from flexlog.containers import build_container

app = create_app(build_container())
