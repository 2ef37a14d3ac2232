import logging
from flask import Blueprint, render_template, request, redirect, url_for, current_app, flash
from datetime import date
from auth_utils import login_required, current_user_id
from budget import CATEGORIES, ExpenseRecord, parse_amount
from budget.periods import days_in_month, month_label, month_param, parse_month, shift_month
from errors import ParseFailure
from stores import ReceiptStore, RecordStore
from stores.receipts import allowed_receipt, owns_receipt
from stores.records import empty_record

logger = logging.getLogger(__name__)

expenses_bp = Blueprint('expenses', __name__, url_prefix='/expenses')

MAX_NOTE_LENGTH = 1000


def allowed_attachment(filename):
    return allowed_receipt(filename, current_app.config.get('ALLOWED_RECEIPT_EXT', {'png', 'jpg', 'jpeg'}))


def selected_day(value, month, today=None):
    """Day from the query string, else today within the current month, else 1."""
    days = days_in_month(month)
    try:
        day = int(value)
    except (TypeError, ValueError):
        today = today or date.today()
        day = today.day if (today.year, today.month) == (month.year, month.month) else 1
    return day if 1 <= day <= days else 1


def editor_url(month, day):
    return url_for('expenses.index', month=month_param(month), day=day)


@expenses_bp.route('/')
@login_required
def index():
    month = parse_month(request.args.get('month'))
    day = selected_day(request.args.get('day'), month)

    result = RecordStore(current_app.db_pool).get_day(current_user_id(), month_label(month), day)
    if not result.ok:
        flash("Could not load this day's expenses.", "error")
    record = result.value if result.ok and result.value else empty_record(day)

    return render_template(
        'expenses.html',
        record=record,
        categories=CATEGORIES,
        day=day,
        days=range(1, days_in_month(month) + 1),
        month_label=month_label(month),
        month_param=month_param(month),
        prev_month=month_param(shift_month(month, -1)),
        next_month=month_param(shift_month(month, 1)),
    )


@expenses_bp.route('/save', methods=['POST'])
@login_required
def save():
    user_id = current_user_id()
    month = parse_month(request.form.get('month'))
    try:
        day = int(request.form.get('day', ''))
    except ValueError:
        day = 0
    if not 1 <= day <= days_in_month(month):
        flash("Please choose a valid day.", "error")
        return redirect(url_for('expenses.index', month=month_param(month)))

    amounts = {}
    for category in CATEGORIES:
        raw = request.form.get(category, '').strip()
        if not raw:
            amounts[category] = 0.0
            continue
        try:
            amounts[category] = parse_amount(raw)
        except ParseFailure:
            flash(f"{category} must be a non-negative number.", "error")
            return redirect(editor_url(month, day))

    notes = request.form.get('notes', '')
    if len(notes) > MAX_NOTE_LENGTH:
        flash(f"Notes must be at most {MAX_NOTE_LENGTH} characters.", "error")
        return redirect(editor_url(month, day))

    receipt_ref = request.form.get('receipt_ref') or None
    if receipt_ref and not owns_receipt(user_id, receipt_ref):
        receipt_ref = None

    receipts = ReceiptStore(current_app.config['RECEIPT_FOLDER'])
    new_receipt = None
    upload = request.files.get('receipt')
    if upload and upload.filename:
        if not allowed_attachment(upload.filename):
            flash("Receipts must be PNG or JPEG images.", "error")
            return redirect(editor_url(month, day))
        uploaded = receipts.save(user_id, upload)
        if not uploaded.ok:
            flash("Upload failed. Your expenses were not saved.", "error")
            return redirect(editor_url(month, day))
        receipt_ref = new_receipt = uploaded.value

    record = ExpenseRecord(day=day, category_amounts=amounts, notes=notes, receipt_ref=receipt_ref)
    result = RecordStore(current_app.db_pool).put(user_id, month_label(month), record)
    if result.ok:
        flash("Expenses saved!", "success")
    else:
        # No upload may outlive a failed write.
        if new_receipt and not receipts.delete(user_id, new_receipt).ok:
            logger.error("Orphaned receipt %s after failed save", new_receipt)
        flash("Error saving expenses. Please try again.", "error")
    return redirect(editor_url(month, day))
