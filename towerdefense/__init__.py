"""A real-time tower defense game: simulation, pygame rendering and a window loop."""

__version__ = "0.1.0"