"""Spaceship builder - shuffle, classify and report spaceship parts."""

__version__ = "1.0.0"
