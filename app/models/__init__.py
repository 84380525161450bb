"""
Database models package.
"""

from app.models.application import Application

__all__ = ["Application"]
