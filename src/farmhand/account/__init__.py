"""
Account

This package provides operator accounts, their roles, and login.
"""

from farmhand.account.model import Account, Role
from farmhand.account.service import AccountService

__all__ = ["Account", "AccountService", "Role"]
