# galleryadmin/services/transactions.py
import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError

from ..errors import PersistenceError
from ..models import Transaction
from ..result import Err, Ok, Result

logger = logging.getLogger(__name__)


def list_transactions() -> Result[List[Transaction], PersistenceError]:
    try:
        transactions = Transaction.query.order_by(Transaction.created_at.desc()).all()
    except SQLAlchemyError:
        logger.exception("Error fetching transactions")
        return Err(PersistenceError("Failed to fetch transactions"))
    return Ok(transactions)
