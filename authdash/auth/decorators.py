"""
Auth Decorators

Both checks read only the session flags written at login; neither touches
the user store.
"""

from functools import wraps
from flask import session, redirect, url_for


def auth_required(f):
    """Decorator to ensure the session is authenticated.
    
    Returns: Redirect to the landing page for anonymous sessions
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        if not session.get('is_auth'):
            return redirect(url_for('dashboard.index'))
        return f(*args, **kwargs)
    return wrapper


def redirect_if_authenticated(f):
    """Decorator for public pages: authenticated sessions go to the dashboard."""
    @wraps(f)
    def wrapper(*args, **kwargs):
        if session.get('is_auth'):
            return redirect(url_for('dashboard.dashboard'))
        return f(*args, **kwargs)
    return wrapper
