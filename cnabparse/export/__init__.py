"""Renderers for decoded records."""
