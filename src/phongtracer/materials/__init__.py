"""Phong materials and point lights."""
