"""Materialize Karaf feature descriptors into a Maven-style repository directory."""

__version__ = "0.1.0"
