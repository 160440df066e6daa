"""
Admin Blueprint

User management for accounts whose admin flag is set.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from authdash.admin import routes  # noqa: E402, F401
