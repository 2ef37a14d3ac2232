from flask import Flask
from config import Config
from logger import setup_logger
from models import db


def init_db(config_class=Config):
    """Create any missing tables for the configured database."""
    logger = setup_logger("dailyspends.init_db", getattr(config_class, "LOG_LEVEL", "INFO"))

    app = Flask(__name__)
    app.config.from_object(config_class)
    db.init_app(app)
    with app.app_context():
        db.create_all()
        tables = sorted(db.metadata.tables)
    logger.info("Schema ready: %s", ", ".join(tables))
    return tables


if __name__ == "__main__":
    init_db()
