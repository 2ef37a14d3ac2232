from flask import Blueprint, render_template, request, redirect, url_for, current_app, flash
from auth_utils import login_required, current_user_id
from budget import LimitsState, parse_limits
from stores import LimitStore

settings_bp = Blueprint('settings', __name__, url_prefix='/settings')


def limits_state():
    return LimitsState(LimitStore(current_app.db_pool), current_user_id())


@settings_bp.route('/')
@login_required
def index():
    state = limits_state()
    if not state.refresh().ok:
        flash("Could not load your limits.", "error")
    return render_template('settings.html', limits=state.limits)


@settings_bp.route('/update', methods=['POST'])
@login_required
def update_limits():
    limits = parse_limits(
        request.form.get('daily_limit'),
        request.form.get('monthly_limit'),
        request.form.get('yearly_limit'),
    )

    result = limits_state().save(limits)
    if result.ok:
        flash("Limits saved successfully!", "success")
    else:
        flash("Error saving limits. Please try again.", "error")
    return redirect(url_for('settings.index'))
