from typing import List, Optional

from sqlalchemy.orm import Session

from teamcollab.models import Attachment, Comment, Project, Task, User


class UserRepository:
    def __init__(self, session: Session):
        self.session = session

    def list_all(self) -> List[User]:
        return self.session.query(User).order_by(User.id).all()

    def get(self, user_id: int) -> Optional[User]:
        return self.session.get(User, user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        return self.session.query(User).filter(User.username == username).first()

    def get_by_email(self, email: str) -> Optional[User]:
        return self.session.query(User).filter(User.email == email).first()

    def exists_by_username(self, username: str) -> bool:
        return self.session.query(self.session.query(User).filter(User.username == username).exists()).scalar()

    def exists_by_email(self, email: str) -> bool:
        return self.session.query(self.session.query(User).filter(User.email == email).exists()).scalar()

    def add(self, user: User) -> User:
        self.session.add(user)
        self.session.flush()
        return user

    def delete(self, user: User) -> None:
        self.session.delete(user)
        self.session.flush()

    def release_references(self, user_id: int) -> None:
        """Null out creator/author/uploader columns pointing at ``user_id``."""
        for model, column in (
            (Project, Project.created_by_id),
            (Task, Task.created_by_id),
            (Comment, Comment.author_id),
            (Attachment, Attachment.uploaded_by_id),
        ):
            self.session.query(model).filter(column == user_id).update(
                {column: None}, synchronize_session="fetch"
            )
