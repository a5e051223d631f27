"""Shapes, intersections and the world."""
