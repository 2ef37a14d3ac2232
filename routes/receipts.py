from flask import Blueprint, render_template, current_app, flash
from auth_utils import login_required, current_user_id
from stores import ReceiptStore

receipts_bp = Blueprint('receipts', __name__, url_prefix='/receipts')


@receipts_bp.route('/')
@login_required
def index():
    result = ReceiptStore(current_app.config['RECEIPT_FOLDER']).list(current_user_id())
    if not result.ok:
        flash("Could not load your bills.", "error")
    return render_template('receipts.html', receipts=result.value if result.ok else [])
