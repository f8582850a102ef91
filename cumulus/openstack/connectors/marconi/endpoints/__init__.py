"""Marconi endpoint specs."""
