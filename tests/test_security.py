"""
Security test suite for DailySpends.
Tests cover authentication, CSRF protection, security headers
and session settings.
"""

import pytest
import os
import sys

# Ensure the project root is on sys.path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))


def login_session(client):
    """Helper to set up a logged-in session."""
    with client.session_transaction() as sess:
        sess['user_id'] = 1
        sess['user_name'] = 'Test User'


# ─────────────────────────────────────────────────────────────
#  1. AUTHENTICATION TESTS
# ─────────────────────────────────────────────────────────────

class TestAuthentication:
    """Test that protected routes require authentication."""

    PROTECTED_ROUTES = [
        ('GET', '/'),
        ('GET', '/expenses/'),
        ('GET', '/settings/'),
        ('GET', '/receipts/'),
        ('GET', '/auth/profile'),
        ('GET', '/uploads/receipts/1/bill.jpg'),
    ]

    @pytest.mark.parametrize("method,url", PROTECTED_ROUTES)
    def test_protected_routes_redirect_to_login(self, client, method, url):
        """Unauthenticated users should be redirected to login."""
        response = client.get(url)

        assert response.status_code in (302, 308), \
            f"{method} {url} should redirect unauthenticated users"
        assert '/auth/login' in response.headers.get('Location', '')

    def test_login_page_accessible(self, client):
        response = client.get('/auth/login')
        assert response.status_code == 200

    def test_signup_page_accessible(self, client):
        response = client.get('/auth/signup')
        assert response.status_code == 200


# ─────────────────────────────────────────────────────────────
#  2. CSRF PROTECTION TESTS
# ─────────────────────────────────────────────────────────────

class TestCSRFProtection:
    """Test that CSRF tokens are required for all POST endpoints."""

    def test_login_post_without_csrf_rejected(self, client):
        response = client.post('/auth/login', data={
            'email': 'test@test.com',
            'password': 'password123'
        })
        assert response.status_code == 400

    def test_signup_post_without_csrf_rejected(self, client):
        response = client.post('/auth/signup', data={
            'name': 'Test',
            'email': 'test@test.com',
            'password': 'password12345'
        })
        assert response.status_code == 400

    def test_save_expenses_without_csrf_rejected(self, client):
        login_session(client)
        response = client.post('/expenses/save', data={'month': '2025-01', 'day': '1'})
        assert response.status_code == 400

    def test_update_limits_without_csrf_rejected(self, client):
        login_session(client)
        response = client.post('/settings/update', data={'daily_limit': '5'})
        assert response.status_code == 400

    def test_forms_carry_csrf_token(self, client):
        response = client.get('/auth/login')
        assert b'name="csrf_token"' in response.data


# ─────────────────────────────────────────────────────────────
#  3. SECURITY HEADERS TESTS
# ─────────────────────────────────────────────────────────────

class TestSecurityHeaders:
    """Test that security headers are set on responses."""

    def test_x_content_type_options(self, client):
        response = client.get('/auth/login')
        assert response.headers.get('X-Content-Type-Options') == 'nosniff'

    def test_x_frame_options(self, client):
        response = client.get('/auth/login')
        assert response.headers.get('X-Frame-Options') == 'SAMEORIGIN'

    def test_x_xss_protection(self, client):
        response = client.get('/auth/login')
        assert response.headers.get('X-XSS-Protection') == '1; mode=block'

    def test_referrer_policy(self, client):
        response = client.get('/auth/login')
        assert response.headers.get('Referrer-Policy') == 'strict-origin-when-cross-origin'


# ─────────────────────────────────────────────────────────────
#  4. SESSION SECURITY TESTS
# ─────────────────────────────────────────────────────────────

class TestSessionSecurity:
    """Test session cookie security configuration."""

    def test_session_cookie_httponly(self, app):
        assert app.config.get('SESSION_COOKIE_HTTPONLY') is True

    def test_session_cookie_samesite(self, app):
        assert app.config.get('SESSION_COOKIE_SAMESITE') == 'Lax'

    def test_secret_key_generated_when_missing(self):
        from unittest.mock import MagicMock
        from app import create_app

        class NoSecretConfig:
            SECRET_KEY = None
            TESTING = True
            RECEIPT_FOLDER = '/tmp/dailyspends_test_uploads/receipts'
            LOG_LEVEL = 'WARNING'

            @staticmethod
            def init_db(app):
                app.db_pool = MagicMock()

        application = create_app(config_class=NoSecretConfig)
        assert len(application.config['SECRET_KEY']) >= 32


# ─────────────────────────────────────────────────────────────
#  5. PASSWORD SECURITY TESTS
# ─────────────────────────────────────────────────────────────

class TestPasswordSecurity:
    """Test password hashing and validation."""

    def test_password_hashing(self):
        from werkzeug.security import generate_password_hash, check_password_hash
        pw = 'test_password_123'
        hashed = generate_password_hash(pw)
        assert hashed != pw
        assert check_password_hash(hashed, pw) is True
        assert check_password_hash(hashed, 'wrong_password') is False

    def test_min_password_length_constant(self):
        from routes.auth import MIN_PASSWORD_LENGTH
        assert MIN_PASSWORD_LENGTH >= 8
