"""ASGI entrypoint for the dessert clicker API."""

from dessert_clicker.api.app import create_app
from dessert_clicker.containers import build_container

app = create_app(build_container())
