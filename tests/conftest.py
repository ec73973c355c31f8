"""
Pytest configuration
Provides the application, a test client and a logged-in admin client.
Each test gets a fresh in-memory SQLite database and its own upload folder.
"""

import os
import sys

import pytest

# Add project root to sys.path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from app import create_app
from extensions import db
from utils.security import create_admin_user

ADMIN_EMAIL = 'admin@example.com'
ADMIN_PASSWORD = 'correct-horse-battery'


# ==================== Application Fixtures ====================

@pytest.fixture(scope="function")
def upload_dir(tmp_path):
    return tmp_path / 'uploads'


@pytest.fixture(scope="function")
def app(upload_dir):
    """
    Application configured for testing
    The in-memory database is discarded with the app at the end of each test
    """
    app = create_app('testing', overrides={'UPLOAD_FOLDER': str(upload_dir)})

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture(scope="function")
def client(app):
    return app.test_client()


# ==================== Admin Fixtures ====================

@pytest.fixture(scope="function")
def admin_password():
    return ADMIN_PASSWORD


@pytest.fixture(scope="function")
def admin_user(app):
    with app.app_context():
        user = create_admin_user(ADMIN_EMAIL, ADMIN_PASSWORD)
        return user.email


@pytest.fixture(scope="function")
def auth_client(client, admin_user):
    """Test client holding a logged-in admin session"""
    response = client.post('/login', data={'email': ADMIN_EMAIL, 'password': ADMIN_PASSWORD})
    assert response.status_code == 302
    return client
