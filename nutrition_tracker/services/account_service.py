"""
Account Service

Registers login accounts and checks credentials against the stored salted hash.
"""

from typing import Optional

from nutrition_tracker.extensions import db
from nutrition_tracker.models.account import Account
from nutrition_tracker.utils.auth import hash_password, verify_password


def register_account(username: str, password: str) -> Account:
    """
    Create a new login account.

    Raises:
        ValueError: USERNAME_TAKEN when the username already exists
    """
    if Account.query.filter_by(username=username).first():
        raise ValueError("USERNAME_TAKEN: Username already exists")

    account = Account(username=username, password=hash_password(password))
    db.session.add(account)
    db.session.commit()
    return account


def authenticate(username: str, password: str) -> Optional[Account]:
    """Return the account when the credentials match, otherwise None."""
    account = Account.query.filter_by(username=username).first()
    if not account or not verify_password(account.password, password):
        return None
    return account
