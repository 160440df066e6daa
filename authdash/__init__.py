"""
authdash - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask, render_template
from authdash.extensions import db, login_manager
from authdash.config import Config
from authdash.sessions import DatabaseSessionInterface

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    """Create and configure the Flask application.
    
    Args:
        config_class: Configuration class to use (default: Config)
    
    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    logger.setLevel(app.config['LOG_LEVEL'])
    
    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    # Session contents are managed by the auth routes only
    login_manager.session_protection = None
    app.session_interface = DatabaseSessionInterface()
    
    # Register blueprints
    from authdash.auth import auth_bp
    from authdash.admin import admin_bp
    from authdash.dashboard import dashboard_bp
    from authdash.commands import cli_bp
    
    app.register_blueprint(auth_bp)
    app.register_blueprint(admin_bp)
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(cli_bp)
    
    # current_user is whoever the session's email resolves to
    @login_manager.request_loader
    def load_user_from_session(request):
        from flask import session
        from authdash.models import User
        if not session.get('is_auth'):
            return None
        return User.query.filter_by(email=session.get('user_email')).first()
    
    @app.errorhandler(404)
    def page_not_found(error):
        return render_template('404.html'), 404
    
    @app.errorhandler(500)
    def internal_error(error):
        # Flask has already logged the exception
        db.session.rollback()
        return render_template('error.html', error='An unexpected error occurred'), 500
    
    # Create database tables
    with app.app_context():
        os.makedirs(app.instance_path, exist_ok=True)
        db.create_all()
    
    return app
