"""User accounts: registration, lookup, profile updates and credential checks."""
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from teamcollab import auth
from teamcollab.errors import AuthError, NotFoundError, ValidationError
from teamcollab.models import User, UserRole
from teamcollab.repositories import UserRepository
from teamcollab.schemas import UserCreate

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("name", "email", "role")


class UserService:
    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)

    def get_all(self) -> List[User]:
        return self.users.list_all()

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        return self.users.get_by_username(username)

    def require(self, user_id: int) -> User:
        user = self.users.get(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    def exists_by_username(self, username: str) -> bool:
        return self.users.exists_by_username(username)

    def exists_by_email(self, email: str) -> bool:
        return self.users.exists_by_email(email)

    def create(self, user_in: UserCreate, role: UserRole = UserRole.MEMBER) -> User:
        if self.users.exists_by_username(user_in.username):
            raise ValidationError("Username already registered")
        if self.users.exists_by_email(user_in.email):
            raise ValidationError("Email already registered")

        user = User(
            username=user_in.username,
            email=user_in.email,
            password_hash=auth.get_password_hash(user_in.password),
            name=user_in.name,
            role=role,
        )
        try:
            self.users.add(user)
            self.db.commit()
        except IntegrityError as exc:
            # a concurrent registration won the unique constraint
            self.db.rollback()
            raise ValidationError("Username or email already registered") from exc
        self.db.refresh(user)
        logger.info("Created user %s (id=%s)", user.username, user.id)
        return user

    def update(self, user_id: int, fields: Dict[str, Any]) -> User:
        user = self.require(user_id)

        new_email = fields.get("email")
        if new_email is not None and new_email != user.email:
            other = self.users.get_by_email(new_email)
            if other is not None and other.id != user.id:
                raise ValidationError("Email already registered")

        for field in UPDATABLE_FIELDS:
            if field not in fields:
                continue
            if field in ("email", "role") and fields[field] is None:
                raise ValidationError(f"{field} cannot be null")
            setattr(user, field, fields[field])

        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise ValidationError("Email already registered") from exc
        self.db.refresh(user)
        return user

    def delete(self, user_id: int) -> None:
        user = self.require(user_id)
        self.users.release_references(user.id)
        self.users.delete(user)
        self.db.commit()
        logger.info("Deleted user id=%s", user_id)

    def authenticate(self, username: str, password: str) -> User:
        user = self.users.get_by_username(username)
        if user is None or not auth.verify_password(password, user.password_hash):
            logger.warning("Failed login for username %r", username)
            raise AuthError("Invalid username or password.")
        return user

    def resolve_token(self, token: str) -> User:
        """Return the stored user named by a bearer token."""
        username = auth.decode_username(token)
        user = self.users.get_by_username(username)
        if user is None:
            raise AuthError("User for token no longer exists.")
        return user
