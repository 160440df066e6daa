"""
Admin Decorator
"""

import logging
from functools import wraps

from flask import session, redirect, url_for
from flask_login import current_user
from sqlalchemy.exc import SQLAlchemyError

from authdash.extensions import db

logger = logging.getLogger(__name__)


def admin_required(f):
    """Decorator to ensure the request is from an authenticated admin.
    
    - Anonymous sessions are sent to the landing page
    - The user is re-fetched by session email on every request, so a
      demotion takes effect immediately
    - Missing users, non-admins and store errors are sent to the dashboard
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        if not session.get('is_auth'):
            return redirect(url_for('dashboard.index'))
        
        try:
            is_admin = current_user.is_authenticated and current_user.is_admin
        except SQLAlchemyError:
            db.session.rollback()
            logger.exception('Error checking user admin status')
            return redirect(url_for('dashboard.dashboard'))
        
        if not is_admin:
            return redirect(url_for('dashboard.dashboard'))
        return f(*args, **kwargs)
    return wrapper
