"""
Flask Extensions

Flask-Login only resolves `current_user` from the session's email; the
authenticated flag itself lives in the server-side session.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance (users and sessions)
db = SQLAlchemy()

login_manager = LoginManager()
