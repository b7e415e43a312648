# galleryadmin/routes/transactions.py
from flask import Blueprint, jsonify

from ..result import Err
from ..schema import transaction_to_dict
from ..services.transactions import list_transactions
from . import error_response

bp = Blueprint("transactions", __name__)


@bp.route("/transactions")
def transaction_list():
    result = list_transactions()
    if isinstance(result, Err):
        return error_response(result.error)
    return jsonify([transaction_to_dict(t) for t in result.value])
