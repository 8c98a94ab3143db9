"""Geometry engine: frame, curves, clipping, shifts, intersections and labels.

Import :func:`econ_diagrams.layout.engine.build_scene` to assemble a scene.
"""
