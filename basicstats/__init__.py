"""Descriptive statistics for a file of whitespace-separated numbers."""
