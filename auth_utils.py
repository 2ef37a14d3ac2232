from functools import wraps
from flask import session, redirect, url_for


def login_required(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        if 'user_id' not in session:
            return redirect(url_for('auth.login'))
        return fn(*args, **kwargs)
    return wrapper


def current_user_id():
    return session.get('user_id')
