import logging
import re
import mysql.connector
from flask import Blueprint, render_template, request, redirect, url_for, current_app, session, flash
from werkzeug.security import generate_password_hash, check_password_hash
from auth_utils import login_required

auth_bp = Blueprint('auth', __name__, url_prefix='/auth')

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8
MAX_NAME_LENGTH = 100
EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def validate_signup(name, email, password):
    if not name or not email or not password:
        return "All fields are required."
    if len(name) > MAX_NAME_LENGTH:
        return f"Name must be at most {MAX_NAME_LENGTH} characters."
    if not EMAIL_RE.match(email):
        return "Please enter a valid email address."
    if len(password) < MIN_PASSWORD_LENGTH:
        return f"Password must be at least {MIN_PASSWORD_LENGTH} characters."
    return None


@auth_bp.route('/signup', methods=['GET', 'POST'])
def signup():
    if request.method == 'POST':
        name = request.form.get('name', '').strip()
        email = request.form.get('email', '').strip().lower()
        password = request.form.get('password', '')

        error = validate_signup(name, email, password)
        if error:
            flash(error, "error")
            return redirect(url_for('auth.signup'))

        try:
            conn = current_app.db_pool.get_connection()
            try:
                with conn.cursor(dictionary=True) as cur:
                    cur.execute("SELECT id FROM users WHERE email=%s", (email,))
                    if cur.fetchone():
                        return "Email already exists", 400
                    pw_hash = generate_password_hash(password)
                    cur.execute(
                        "INSERT INTO users (name, email, password_hash) VALUES (%s, %s, %s)",
                        (name, email, pw_hash)
                    )
                    conn.commit()
            finally:
                conn.close()
        except mysql.connector.Error as e:
            logger.error("Signup failed for %s: %s", email, e)
            flash("Registration is unavailable right now. Please try again.", "error")
            return redirect(url_for('auth.signup'))

        logger.info("Registered %s", email)
        return redirect(url_for('auth.login'))

    return render_template('auth/signup.html')


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    if request.method == 'POST':
        email = request.form.get('email', '').strip().lower()
        password = request.form.get('password', '')

        try:
            conn = current_app.db_pool.get_connection()
            try:
                with conn.cursor(dictionary=True) as cur:
                    cur.execute("SELECT id, name, email, password_hash FROM users WHERE email=%s", (email,))
                    user = cur.fetchone()
            finally:
                conn.close()
        except mysql.connector.Error as e:
            logger.error("Login lookup failed for %s: %s", email, e)
            flash("Login is unavailable right now. Please try again.", "error")
            return redirect(url_for('auth.login'))

        if not user or not check_password_hash(user['password_hash'], password):
            flash("Invalid credentials. Want to sign up?", "error")
            return redirect(url_for('auth.login'))

        session.clear()
        session['user_id'] = user['id']
        session['user_name'] = user['name']
        session['user_email'] = user['email']

        return redirect(url_for('dashboard.index'))

    return render_template('auth/login.html')


@auth_bp.route('/logout')
def logout():
    session.clear()
    return redirect(url_for('auth.login'))


@auth_bp.route('/profile', methods=['GET', 'POST'])
@login_required
def profile():
    try:
        conn = current_app.db_pool.get_connection()
        try:
            with conn.cursor(dictionary=True) as cur:
                if request.method == 'POST':
                    name = request.form.get('name', '').strip()
                    if name and len(name) <= MAX_NAME_LENGTH:
                        cur.execute("UPDATE users SET name=%s WHERE id=%s", (name, session['user_id']))
                        conn.commit()
                        session['user_name'] = name
                        flash("Profile updated.", "success")
                    else:
                        flash(f"Name must be 1 to {MAX_NAME_LENGTH} characters.", "error")

                cur.execute("SELECT id, name, email FROM users WHERE id=%s", (session['user_id'],))
                user = cur.fetchone()
        finally:
            conn.close()
    except mysql.connector.Error as e:
        logger.error("Profile load failed for user %s: %s", session['user_id'], e)
        flash("Your profile could not be loaded.", "error")
        user = None

    if user is None:
        user = {'name': session.get('user_name', ''), 'email': session.get('user_email', '')}

    return render_template('profile.html', user=user)
