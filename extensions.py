"""
Extensions Module - Shared extension instances
Bound to the application in create_app(); models and utils import them from here.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

db = SQLAlchemy()

# Admin views are gated by utils.decorators.login_required; these settings
# only apply to Flask-Login's own unauthorized redirect.
login_manager = LoginManager()
login_manager.login_view = 'auth.login'
login_manager.login_message = 'Please login to access this page.'
login_manager.login_message_category = 'error'

__all__ = ['db', 'login_manager']
