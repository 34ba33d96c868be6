# backend/az204_quiz/__init__.py
"""AZ-204 practice quiz backend: question stores, query service and REST API."""

__version__ = "1.0.0"
