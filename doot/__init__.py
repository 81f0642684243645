"""Spinning tesseract drawn with a minimal 2D OpenGL renderer, plus the vector and matrix maths behind it."""

__version__ = "0.1.0"