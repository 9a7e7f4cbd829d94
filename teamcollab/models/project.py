"""
Project Model
"""
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Table
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from teamcollab.database import Base


project_members = Table(
    "project_members",
    Base.metadata,
    Column("project_id", Integer, ForeignKey("projects.id", ondelete="CASCADE"), primary_key=True),
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
)


class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    color = Column(String(32), nullable=True)
    created_by_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    # Relationships
    created_by = relationship("User", foreign_keys=[created_by_id])
    members = relationship("User", secondary=project_members, back_populates="projects", order_by="User.id")
    tasks = relationship("Task", back_populates="project", cascade="all, delete-orphan", order_by="Task.id")

    def add_member(self, user) -> bool:
        """Add ``user`` unless already a member. Returns whether anything changed."""
        if user in self.members:
            return False
        self.members.append(user)
        return True

    def remove_member(self, user) -> bool:
        if user not in self.members:
            return False
        self.members.remove(user)
        return True
