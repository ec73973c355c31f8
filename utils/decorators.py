"""
Decorators Module - Admin session gate for views
"""

from functools import wraps
from flask import g, redirect, url_for, flash, request, jsonify
from .security import resolve_admin_session, Unauthenticated


def login_required(f):
    """Decorator to require an admin session; redirects to the login page otherwise"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        state = resolve_admin_session()
        if isinstance(state, Unauthenticated):
            flash('Please login to access this page.', 'error')
            return redirect(url_for('auth.login', next=request.path))
        g.admin_session = state
        return f(*args, **kwargs)
    return decorated_function


def api_login_required(f):
    """JSON variant of login_required for upload endpoints"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        state = resolve_admin_session()
        if isinstance(state, Unauthenticated):
            return jsonify({'error': 'Authentication required'}), 401
        g.admin_session = state
        return f(*args, **kwargs)
    return decorated_function
