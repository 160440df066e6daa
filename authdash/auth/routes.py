"""
Auth Routes

Registration, login and logout backed by the server-side session.
"""

import logging

from flask import render_template, request, redirect, url_for, flash, session
from sqlalchemy.exc import SQLAlchemyError
from authdash.auth import auth_bp
from authdash.auth.decorators import redirect_if_authenticated
from authdash.auth.validators import validate_registration, validate_login
from authdash.extensions import db
from authdash.models import User
from authdash.sessions import destroy_session

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = 'Invalid email or password'


@auth_bp.route('/register', methods=['GET'])
@redirect_if_authenticated
def register():
    """Registration form"""
    return render_template('register.html')


@auth_bp.route('/register', methods=['POST'])
def register_submit():
    """Create a user account, then send the user to the login page"""
    username = request.form.get('username', '').strip()
    email = request.form.get('email', '').strip()
    password = request.form.get('password', '')
    admin = request.form.get('admin') == 'on'

    errors = validate_registration(username, email, password)
    if errors:
        logger.debug('Registration rejected for %r: %s', email, errors)
        for error in errors:
            flash(error, 'danger')
        return redirect(url_for('auth.register'))

    if User.query.filter_by(email=email).first():
        logger.debug('Registration rejected for %r: email already registered', email)
        flash('Email already registered. Please login or use another email.', 'danger')
        return redirect(url_for('auth.register'))

    new_user = User(username=username, email=email, is_admin=admin)
    new_user.set_password(password)

    try:
        db.session.add(new_user)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Registration failed for %r', email)
        flash('An error occurred during registration. Please try again.', 'danger')
        return redirect(url_for('auth.register'))

    logger.info('Registered user %r (admin=%s)', email, admin)
    flash('Registration successful! Please login.', 'success')
    return redirect(url_for('auth.login'))


@auth_bp.route('/login', methods=['GET'])
@redirect_if_authenticated
def login():
    """Login form"""
    return render_template('login.html')


@auth_bp.route('/login', methods=['POST'])
def login_submit():
    """Check credentials and mark the session authenticated"""
    email = request.form.get('email', '').strip()
    password = request.form.get('password', '')

    if validate_login(email, password):
        return redirect(url_for('auth.login'))

    user = User.query.filter_by(email=email).first()

    if user is None or not user.check_password(password):
        logger.info('Failed login for %r', email)
        return render_template('login.html', error=INVALID_CREDENTIALS), 400

    session.permanent = True
    session['is_auth'] = True
    session['user_email'] = user.email
    return redirect(url_for('dashboard.dashboard'))


@auth_bp.route('/logout', methods=['POST'])
def logout():
    """Destroy the session; on failure keep the user where they were"""
    try:
        destroy_session()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Error destroying session')
        return redirect(url_for('dashboard.dashboard'))

    return redirect(url_for('dashboard.index'))
