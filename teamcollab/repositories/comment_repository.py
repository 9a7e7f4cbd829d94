from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from teamcollab.models import Comment


class CommentRepository:
    def __init__(self, session: Session):
        self.session = session

    def list_by_task(self, task_id: int) -> List[Comment]:
        return (
            self.session.query(Comment)
            .options(selectinload(Comment.author))
            .filter(Comment.task_id == task_id)
            .order_by(Comment.created_at.asc(), Comment.id.asc())
            .all()
        )

    def get_for_task(self, task_id: int, comment_id: int) -> Optional[Comment]:
        return (
            self.session.query(Comment)
            .filter(Comment.id == comment_id, Comment.task_id == task_id)
            .first()
        )

    def add(self, comment: Comment) -> Comment:
        self.session.add(comment)
        self.session.flush()
        return comment

    def delete(self, comment: Comment) -> None:
        self.session.delete(comment)
        self.session.flush()
