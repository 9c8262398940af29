"""Shared pytest configuration: headless backends for matplotlib and pygame."""

import os

os.environ.setdefault("MPLBACKEND", "Agg")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
