"""
user_service.py: Credentials and score ledger
Registration, login, profile lookups and score appends against the users table.
"""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from auth import hash_password, verify_password
from errors import AuthenticationError, ConflictError, NotFoundError, ValidationError
from models.user import User

logger = logging.getLogger(__name__)

# Same message whether the email is taken or the insert lost a race
REGISTRATION_CONFLICT = "Unable to register with the supplied details"
INVALID_CREDENTIALS = "Invalid credentials"


class UserService:
    @staticmethod
    def register(db: Session, name: str | None, email: str | None, password: str | None) -> User:
        if not name or not email or not password:
            raise ValidationError("Name, email, and password are required")

        email = email.strip().lower()
        if UserService.find_by_email(db, email) is not None:
            raise ConflictError(REGISTRATION_CONFLICT)

        user = User(email=email, password=hash_password(password), name=name, scores=[])
        try:
            db.add(user)
            db.commit()
            db.refresh(user)
        except IntegrityError:
            db.rollback()
            raise ConflictError(REGISTRATION_CONFLICT)
        except SQLAlchemyError:
            db.rollback()
            raise

        logger.info("Registered user %s", user.id)
        return user

    @staticmethod
    def login(db: Session, email: str | None, password: str | None) -> User:
        """Return the user if the password matches; one error for every failure."""
        if not email or not password:
            raise ValidationError("Email and password are required")

        user = UserService.find_by_email(db, email)
        if user is None or not verify_password(password, user.password):
            raise AuthenticationError(INVALID_CREDENTIALS)
        return user

    @staticmethod
    def find_by_email(db: Session, email: str) -> User | None:
        # Stored emails are already lowercase, so the index on email applies
        return db.query(User).filter(User.email == email.strip().lower()).first()

    @staticmethod
    def get_by_id(db: Session, user_id: int) -> User:
        user = db.get(User, user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    @staticmethod
    def add_score(db: Session, user_id: int, score: int | float | None) -> list:
        """Append one score to the end of the user's ledger and return the new ledger."""
        if score is None:
            raise ValidationError("Score is required")

        try:
            # Row lock on MySQL/PostgreSQL; SQLite serialises writers itself
            user = db.query(User).filter(User.id == user_id).with_for_update().first()
            if user is None:
                raise NotFoundError("User not found")

            # Assign a new list so the change is flushed
            user.scores = [*(user.scores or []), score]
            db.commit()
        except (SQLAlchemyError, NotFoundError):
            db.rollback()
            raise

        return list(user.scores)
