from typing import List, Optional

from nutrition_tracker.extensions import db
from nutrition_tracker.models.account import Account
from nutrition_tracker.models.user import User


def get_user_or_raise(user_id: int) -> User:
    user = db.session.get(User, user_id)
    if not user:
        raise ValueError("USER_NOT_FOUND: User not found")
    return user


def create_user(name: str, account_id: Optional[int] = None) -> User:
    if account_id is not None and not db.session.get(Account, account_id):
        raise ValueError("ACCOUNT_NOT_FOUND: Account not found")

    user = User(name=name, account_id=account_id)
    db.session.add(user)
    db.session.commit()
    return user


def list_users(account_id: Optional[int] = None) -> List[User]:
    query = User.query
    if account_id is not None:
        query = query.filter_by(account_id=account_id)
    return query.order_by(User.created_at.asc(), User.id.asc()).all()


def delete_user(user_id: int) -> None:
    """Delete a user together with its goal, food logs, entries and favorites."""
    user = get_user_or_raise(user_id)
    db.session.delete(user)
    db.session.commit()
