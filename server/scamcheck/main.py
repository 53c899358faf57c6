"""ASGI entrypoint: uvicorn scamcheck.main:app"""
from scamcheck.app import create_app
from scamcheck.core.config import load_settings

app = create_app(load_settings())
