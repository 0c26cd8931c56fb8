"""
User Repository - Data Access Layer
"""
from typing import List, Optional
from sqlalchemy.orm import Session

from storefront.models.user import User


class UserRepository:
    """Repository for User persistence"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def get_all(self, skip: int = 0, limit: int = 100) -> List[User]:
        """Get users in signup order, with pagination"""
        return self.db.query(User).order_by(User.id).offset(skip).limit(limit).all()

    def create(self, user: User) -> User:
        """Insert a new user"""
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def save(self, user: User) -> User:
        """Commit changes made to a loaded user"""
        self.db.commit()
        self.db.refresh(user)
        return user
