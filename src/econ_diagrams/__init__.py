"""econ-diagrams: textbook economics diagrams rendered to SVG."""

__version__ = "0.1.0"
