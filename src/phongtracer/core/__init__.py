"""Homogeneous tuples, colors, matrices, transforms and rays."""
