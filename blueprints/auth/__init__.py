"""
Auth Blueprint - Authentication
Handles: Admin login and logout
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__, url_prefix='')

from . import routes
