"""
Logging and metrics for schedule imports.
"""
