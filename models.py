from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


class User(db.Model):
    __tablename__ = "users"
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(255), nullable=False, unique=True)
    password_hash = db.Column(db.String(255), nullable=False)


class ExpenseDay(db.Model):
    __tablename__ = "expense_days"
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    month_label = db.Column(db.String(20), nullable=False)  # e.g. 'October 2026'
    day = db.Column(db.Integer, nullable=False)
    amounts = db.Column(db.Text, nullable=False, default="{}")  # JSON category -> amount
    notes = db.Column(db.Text)
    receipt_ref = db.Column(db.String(255))

    __table_args__ = (
        db.UniqueConstraint("user_id", "month_label", "day", name="uq_user_month_day"),
    )


class UserLimit(db.Model):
    __tablename__ = "user_limits"
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), primary_key=True)
    daily_limit = db.Column(db.Numeric(10, 2), nullable=False, default=0.0)
    monthly_limit = db.Column(db.Numeric(10, 2), nullable=False, default=0.0)
    yearly_limit = db.Column(db.Numeric(10, 2), nullable=False, default=0.0)
