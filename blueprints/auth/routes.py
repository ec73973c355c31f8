"""
Auth Routes - Admin authentication
"""

from flask import render_template, redirect, url_for, request, flash, current_app
from flask_login import login_user, logout_user
from utils.security import authenticate, get_client_ip, resolve_admin_session, Authenticated, is_safe_next
from . import auth_bp


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """Admin login with email and password"""
    if isinstance(resolve_admin_session(), Authenticated):
        return redirect(url_for('admin.index'))

    next_url = request.args.get('next') or request.form.get('next')
    error = None

    if request.method == 'POST':
        email = request.form.get('email', '').strip()
        password = request.form.get('password', '')
        client_ip = get_client_ip()

        user = authenticate(email, password)
        if user:
            login_user(user, remember=bool(request.form.get('remember')))
            current_app.logger.info(f"Admin login: {user.email} from {client_ip}")
            flash('Welcome back!', 'success')
            return redirect(next_url if is_safe_next(next_url) else url_for('admin.index'))

        current_app.logger.warning(f"Failed login for {email or '<blank>'} from {client_ip}")
        error = 'Invalid email or password'

    return render_template('auth/login.html', error=error, next_url=next_url), (401 if error else 200)


@auth_bp.route('/logout')
def logout():
    """Logout current admin"""
    state = resolve_admin_session()
    if isinstance(state, Authenticated):
        current_app.logger.info(f"Admin logout: {state.user.email} from {get_client_ip()}")
    logout_user()
    flash('Logged out successfully', 'success')
    return redirect(url_for('auth.login'))
