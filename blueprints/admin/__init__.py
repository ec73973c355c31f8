"""
Admin Blueprint - Content management
Handles: Section editors, list editors, media uploads, demo seeding
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__, url_prefix='/admin')

from . import routes
