"""Wireframe height-map pieces (geometry, camera, colour, image, controls) and a small string, formatting and line-reading toolkit."""

__version__ = "0.1.0"