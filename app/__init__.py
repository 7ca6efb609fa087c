"""
Board Champions candidate profile service.

This package provides a FastAPI-based backend for executive candidate profiles,
including completion scoring, viewer-aware redaction and candidate self-service.
"""

__version__ = "1.0.0"
