"""
Models Package

Exports all models for easy importing.
"""

from authdash.models.user import User
from authdash.models.session import ServerSession

__all__ = ['User', 'ServerSession']
