"""
Admin Routes

List users and toggle their admin flag.
"""

import logging

from flask import render_template, redirect, url_for
from sqlalchemy.exc import SQLAlchemyError
from authdash.admin import admin_bp
from authdash.admin.decorators import admin_required
from authdash.extensions import db
from authdash.models import User

logger = logging.getLogger(__name__)


@admin_bp.route('/admin')
@admin_required
def admin_panel():
    """List every registered user with promote/demote actions"""
    try:
        users = User.query.order_by(User.id).all()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Error fetching users')
        return render_template('error.html',
                               error='An error occurred while fetching users'), 500
    
    return render_template('admin.html', users=users)


def _set_admin_flag(user_id, is_admin, action):
    # Unknown ids update nothing and still redirect back to the panel
    try:
        updated = User.query.filter_by(id=user_id).update({'is_admin': is_admin})
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Error %s user %s', action, user_id)
        return render_template('error.html',
                               error=f'An error occurred while {action} user'), 500
    
    logger.info('User %s admin=%s (%d row(s) updated)', user_id, is_admin, updated)
    return redirect(url_for('admin.admin_panel'))


@admin_bp.route('/promote/<int:user_id>')
@admin_required
def promote(user_id):
    """Grant the admin flag"""
    return _set_admin_flag(user_id, True, 'promoting')


@admin_bp.route('/demote/<int:user_id>')
@admin_required
def demote(user_id):
    """Revoke the admin flag"""
    return _set_admin_flag(user_id, False, 'demoting')
