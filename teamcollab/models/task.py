"""
Task Model
"""
from sqlalchemy import Column, Integer, String, Text, Date, DateTime, ForeignKey, Table, Enum as SQLEnum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import enum
from teamcollab.database import Base


class TaskStatus(str, enum.Enum):
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    HOLD = "HOLD"


class TaskPriority(str, enum.Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


DEFAULT_STATUS = TaskStatus.TODO
DEFAULT_PRIORITY = TaskPriority.MEDIUM


task_assignees = Table(
    "task_assignees",
    Base.metadata,
    Column("task_id", Integer, ForeignKey("tasks.id", ondelete="CASCADE"), primary_key=True),
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
)


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(SQLEnum(TaskStatus), default=DEFAULT_STATUS, nullable=False)
    priority = Column(SQLEnum(TaskPriority), default=DEFAULT_PRIORITY, nullable=False)
    start_date = Column(Date, nullable=True)
    due_date = Column(Date, nullable=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
    created_by_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    # Relationships
    project = relationship("Project", back_populates="tasks")
    created_by = relationship("User", foreign_keys=[created_by_id])
    assignees = relationship("User", secondary=task_assignees, back_populates="assigned_tasks", order_by="User.id")
    comments = relationship("Comment", back_populates="task", cascade="all, delete-orphan", order_by="Comment.id")
    attachments = relationship("Attachment", back_populates="task", cascade="all, delete-orphan", order_by="Attachment.id")

    def add_assignee(self, user) -> bool:
        if user in self.assignees:
            return False
        self.assignees.append(user)
        return True

    def remove_assignee(self, user) -> bool:
        if user not in self.assignees:
            return False
        self.assignees.remove(user)
        return True
