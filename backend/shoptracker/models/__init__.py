from .common import NIL_UUID, new_uuid
from .shops import Shop, StoreValue
from .sales import Sale
from .expenses import Expense, EXPENSE_CATEGORIES
from .auth import User, SessionToken

__all__ = [
    'NIL_UUID', 'new_uuid',
    'Shop', 'StoreValue',
    'Sale',
    'Expense', 'EXPENSE_CATEGORIES',
    'User', 'SessionToken',
]
