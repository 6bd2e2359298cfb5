"""Mandelbrot set rendering to PPM images, serially or across worker processes sharing a grid."""

__version__ = "0.1.0"

__all__ = ["__version__"]