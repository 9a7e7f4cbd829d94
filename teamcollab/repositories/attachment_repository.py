from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from teamcollab.models import Attachment


class AttachmentRepository:
    def __init__(self, session: Session):
        self.session = session

    def list_by_task(self, task_id: int) -> List[Attachment]:
        return (
            self.session.query(Attachment)
            .options(selectinload(Attachment.uploaded_by))
            .filter(Attachment.task_id == task_id)
            .order_by(Attachment.id)
            .all()
        )

    def get_for_task(self, task_id: int, attachment_id: int) -> Optional[Attachment]:
        return (
            self.session.query(Attachment)
            .filter(Attachment.id == attachment_id, Attachment.task_id == task_id)
            .first()
        )

    def add(self, attachment: Attachment) -> Attachment:
        self.session.add(attachment)
        self.session.flush()
        return attachment

    def delete(self, attachment: Attachment) -> None:
        self.session.delete(attachment)
        self.session.flush()
