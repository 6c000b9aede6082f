"""Textual host for infinite paper sessions."""
