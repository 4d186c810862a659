"""Apiary request core: variable resolution and request export."""

from .config import APP_VERSION as __version__
