"""ASGI entrypoint for the booking marketplace API."""

from booking_marketplace.api.app import create_app
from booking_marketplace.containers import build_container

app = create_app(build_container())
