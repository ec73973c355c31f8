"""
Portfolio Site - Application factory
Builds the Flask app: config, database, admin login, blueprints,
error pages and response headers. Routes live in the blueprints.
"""

import os
import logging
from datetime import datetime
from flask import Flask, render_template, request, jsonify, g
from sqlalchemy import text
from config import get_config
from extensions import db, login_manager
from models import AdminUser
from utils.helpers import format_date, format_date_range
from utils.security import ensure_admin_user

from blueprints.portfolio import portfolio_bp
from blueprints.auth import auth_bp
from blueprints.admin import admin_bp
from blueprints.api import api_bp

JSON_PATH_PREFIXES = ('/api/', '/admin/upload')


def create_app(config_name=None, overrides=None):
    """
    Build a configured application instance

    Args:
        config_name (str): 'development', 'production' or 'testing' (defaults to FLASK_ENV)
        overrides (dict): Settings applied on top of the config class

    Returns:
        Flask: The application
    """
    app = Flask(__name__)
    app.config.from_object(get_config(config_name))
    if overrides:
        app.config.update(overrides)

    level = str(app.config.get('LOG_LEVEL', 'INFO')).upper()
    app.logger.setLevel(getattr(logging, level, logging.INFO))

    init_database_and_login(app)
    init_upload_folder(app)

    app.jinja_env.filters['format_date'] = format_date
    app.jinja_env.globals['format_date_range'] = format_date_range

    for blueprint in (portfolio_bp, auth_bp, admin_bp, api_bp):
        app.register_blueprint(blueprint)

    register_error_handlers(app)
    register_hooks(app)

    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Portfolio application is running'}, 200

    return app


def init_database_and_login(app):
    """Bind SQLAlchemy and Flask-Login, create tables and the admin account"""
    db.init_app(app)
    login_manager.init_app(app)

    @login_manager.user_loader
    def load_admin(user_id):
        return db.session.get(AdminUser, user_id)

    with app.app_context():
        try:
            db.create_all()
            db.session.execute(text('SELECT 1'))
            app.logger.info("✓ Content tables ready")
        except Exception as e:
            app.logger.error(f"✗ Database initialization failed: {str(e)}")

        try:
            ensure_admin_user()
        except Exception as e:
            db.session.rollback()
            app.logger.error(f"✗ Admin account bootstrap failed: {str(e)}")


def init_upload_folder(app):
    folder = app.config['UPLOAD_FOLDER']
    try:
        os.makedirs(folder, exist_ok=True)
        app.logger.info(f"✓ Upload folder: {folder}")
    except OSError as e:
        app.logger.error(f"✗ Upload folder unavailable ({folder}): {str(e)}")


def _wants_json():
    return request.path.startswith(JSON_PATH_PREFIXES)


def register_error_handlers(app):
    """HTML error pages for the site, JSON envelopes for API and upload paths"""

    @app.errorhandler(404)
    def page_not_found(e):
        if _wants_json():
            return jsonify({'error': 'Not found'}), 404
        return render_template('errors/404.html'), 404

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error on {request.path}: {str(e)}")
        if _wants_json():
            return jsonify({'error': 'Internal server error'}), 500
        return render_template('errors/500.html'), 500

    @app.errorhandler(413)
    def file_too_large(e):
        limit = app.config['MAX_CONTENT_LENGTH'] // (1024 * 1024)
        return jsonify({'error': f'File is too large. Maximum request size is {limit}MB.'}), 413


def register_hooks(app):
    """Template globals and response headers"""

    @app.context_processor
    def inject_site_settings():
        config = app.config
        return {
            'current_year': datetime.now().year,
            'site_owner_name': config.get('SITE_OWNER_NAME'),
            'site_owner_title': config.get('SITE_OWNER_TITLE'),
            'site_description': config.get('SITE_OWNER_DESCRIPTION'),
            'site_url': config.get('SITE_URL'),
            'admin_session': g.get('admin_session'),
            'max_image_size': config.get('MAX_IMAGE_SIZE'),
            'max_video_size': config.get('MAX_VIDEO_SIZE'),
        }

    @app.after_request
    def set_response_headers(response):
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'SAMEORIGIN'
        # Admin pages and the login form must not be cached
        if request.path.startswith('/admin') or request.path == '/login':
            response.headers['Cache-Control'] = 'no-store'
        return response


if __name__ == '__main__':
    flask_env = os.environ.get('FLASK_ENV', 'development')
    create_app(flask_env).run(
        host='0.0.0.0',
        port=int(os.environ.get('PORT', 5000)),
        debug=(flask_env == 'development')
    )
