from flask import Blueprint, render_template, request, current_app, flash
from auth_utils import login_required, current_user_id
from budget import CATEGORIES, LimitsState, PeriodSelector, aggregate
from budget.periods import month_label, month_param, parse_month, shift_month
from stores import LimitStore, RecordStore

dashboard_bp = Blueprint('dashboard', __name__, url_prefix='')

CATEGORY_COLORS = {
    "Grocery": "green",
    "Travel": "blue",
    "Miscellaneous": "orange",
    "Savings": "purple",
}


def exceeded_messages(result):
    period = result.selector.value.lower()
    messages = [
        f"You have exceeded your {period} budget for {category}!"
        for category in result.exceeded_categories
    ]
    if result.overall_exceeded:
        messages.append(f"You have exceeded your {period} budget limit!")
    return messages


@dashboard_bp.route('/')
@login_required
def index():
    user_id = current_user_id()
    selector = PeriodSelector.from_value(request.args.get('period'))
    month = parse_month(request.args.get('month'))

    records_result = RecordStore(current_app.db_pool).get(user_id, month_label(month))
    if not records_result.ok:
        flash("Could not load your expenses. Please try again.", "error")
    records = records_result.value if records_result.ok else []

    limits_state = LimitsState(LimitStore(current_app.db_pool), user_id)
    if not limits_state.refresh().ok:
        flash("Could not load your limits. Please try again.", "error")

    result = aggregate(records, selector, limits_state.limits, period=month)
    for message in exceeded_messages(result):
        flash(message, "warning")

    return render_template(
        "dashboard.html",
        result=result,
        categories=CATEGORIES,
        colors=CATEGORY_COLORS,
        selectors=list(PeriodSelector),
        selector=selector,
        month=month,
        month_label=month_label(month),
        month_param=month_param(month),
        prev_month=month_param(shift_month(month, -1)),
        next_month=month_param(shift_month(month, 1)),
    )
