"""
Dashboard Routes

Public landing page and the personalized dashboard.
"""

import logging
import random

from flask import render_template, redirect, url_for, session
from flask_login import current_user
from sqlalchemy.exc import SQLAlchemyError
from authdash.auth.decorators import auth_required, redirect_if_authenticated
from authdash.dashboard import dashboard_bp
from authdash.extensions import db

logger = logging.getLogger(__name__)

DASHBOARD_IMAGES = ['image1.svg', 'image2.svg', 'image3.svg']


def pick_dashboard_image():
    """Pick one of the dashboard images uniformly at random."""
    return random.choice(DASHBOARD_IMAGES)


@dashboard_bp.route('/')
@dashboard_bp.route('/landing')
@redirect_if_authenticated
def index():
    """Landing page for anonymous visitors"""
    return render_template('landing.html')


@dashboard_bp.route('/dashboard')
@auth_required
def dashboard():
    """Greet the logged-in user with a random image"""
    try:
        authenticated = current_user.is_authenticated
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Error fetching user details')
        return redirect(url_for('auth.login'))

    # The session email no longer resolves to a user; drop the stale
    # flags so the login page does not bounce back here
    if not authenticated:
        session.pop('is_auth', None)
        session.pop('user_email', None)
        return redirect(url_for('auth.login'))

    return render_template('dashboard.html',
                           username=current_user.username,
                           image=pick_dashboard_image())
