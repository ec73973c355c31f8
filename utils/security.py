"""
Security Module - Admin session resolution and credentials
"""

from dataclasses import dataclass
from datetime import datetime
from flask import request, current_app
from flask_login import current_user
from werkzeug.security import generate_password_hash, check_password_hash
from extensions import db
from models import AdminUser


@dataclass(frozen=True)
class Authenticated:
    user: AdminUser


@dataclass(frozen=True)
class Unauthenticated:
    reason: str = 'no-session'


def resolve_admin_session():
    """Return Authenticated(user) for a live admin session, else Unauthenticated()"""
    if current_user and current_user.is_authenticated:
        return Authenticated(user=current_user._get_current_object())
    return Unauthenticated()


def get_client_ip():
    """Get real client IP address"""
    return request.environ.get('HTTP_X_FORWARDED_FOR',
                               request.environ.get('REMOTE_ADDR', 'unknown'))


def verify_password(password, password_hash):
    """Verify password against hash"""
    return check_password_hash(password_hash, password or '')


def authenticate(email, password):
    """Return the admin user for valid credentials, else None"""
    email = (email or '').strip().lower()
    if not email or not password:
        return None
    user = AdminUser.query.filter_by(email=email).first()
    if user and verify_password(password, user.password_hash):
        user.last_login_at = datetime.utcnow()
        db.session.commit()
        return user
    return None


def create_admin_user(email, password):
    user = AdminUser(email=email.strip().lower(),
                     password_hash=generate_password_hash(password))
    db.session.add(user)
    db.session.commit()
    return user


def ensure_admin_user():
    """Create the admin account from ADMIN_EMAIL/ADMIN_PASSWORD if it does not exist"""
    email = current_app.config.get('ADMIN_EMAIL')
    password = current_app.config.get('ADMIN_PASSWORD')
    if not email or not password:
        current_app.logger.debug("Admin credentials not configured")
        return None

    user = AdminUser.query.filter_by(email=email.strip().lower()).first()
    if user:
        return user
    user = create_admin_user(email, password)
    current_app.logger.info(f"Created admin account {user.email}")
    return user


def is_safe_next(target):
    """Only allow redirects back into the admin area"""
    return bool(target) and target.startswith('/admin') and '//' not in target


__all__ = [
    'Authenticated',
    'Unauthenticated',
    'resolve_admin_session',
    'get_client_ip',
    'verify_password',
    'authenticate',
    'create_admin_user',
    'ensure_admin_user',
    'is_safe_next'
]
