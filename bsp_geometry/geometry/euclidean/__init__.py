"""Euclidean geometries."""
