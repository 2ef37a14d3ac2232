import os
import secrets
from flask import Flask, abort, send_from_directory
from flask_wtf.csrf import CSRFProtect
from config import Config
from auth_utils import login_required, current_user_id
from logger import setup_logger
from stores.receipts import owns_receipt
from routes.dashboard import dashboard_bp
from routes.expenses import expenses_bp
from routes.settings import settings_bp
from routes.receipts import receipts_bp
from routes.auth import auth_bp

csrf = CSRFProtect()

SECURITY_HEADERS = {
    'X-Content-Type-Options': 'nosniff',
    'X-Frame-Options': 'SAMEORIGIN',
    'X-XSS-Protection': '1; mode=block',
    'Referrer-Policy': 'strict-origin-when-cross-origin',
}


def clamp_filter(value, min_val=0, max_val=100):
    try:
        return max(min(float(value), max_val), min_val)
    except (ValueError, TypeError):
        return 0


def create_app(config_class=None):
    config_class = config_class or Config

    app = Flask(__name__)
    app.config.from_object(config_class)

    if not app.config.get("SECRET_KEY"):
        app.config["SECRET_KEY"] = secrets.token_hex(32)

    logger = setup_logger("dailyspends", app.config.get("LOG_LEVEL", "INFO"))

    config_class.init_db(app)
    csrf.init_app(app)

    os.makedirs(app.config['RECEIPT_FOLDER'], exist_ok=True)

    app.register_blueprint(auth_bp)
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(expenses_bp)
    app.register_blueprint(settings_bp)
    app.register_blueprint(receipts_bp)

    app.jinja_env.filters['clamp'] = clamp_filter

    @app.after_request
    def set_security_headers(response):
        for header, value in SECURITY_HEADERS.items():
            response.headers.setdefault(header, value)
        return response

    @app.route('/uploads/receipts/<path:filename>')
    @login_required
    def receipt_file(filename):
        if not owns_receipt(current_user_id(), filename):
            abort(404)
        return send_from_directory(app.config['RECEIPT_FOLDER'], filename)

    logger.info("DailySpends app created")
    return app
