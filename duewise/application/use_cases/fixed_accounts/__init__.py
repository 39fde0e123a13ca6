"""Use cases for managing fixed accounts (recurring bills)."""

from .create_fixed_account import create_fixed_account
from .delete_fixed_account import delete_fixed_account
from .get_fixed_account import get_fixed_account
from .list_fixed_accounts import list_fixed_accounts
from .update_fixed_account import update_fixed_account

__all__ = [
    "create_fixed_account",
    "delete_fixed_account",
    "get_fixed_account",
    "list_fixed_accounts",
    "update_fixed_account",
]
