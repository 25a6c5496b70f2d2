"""Submissions package - public café suggestions."""
