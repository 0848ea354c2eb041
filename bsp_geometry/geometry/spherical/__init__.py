"""Spherical geometries."""
