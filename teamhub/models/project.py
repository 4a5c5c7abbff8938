# teamhub/models/project.py
from sqlalchemy import Column, Integer, String, Boolean, DateTime, JSON, func
from sqlalchemy.orm import relationship

from teamhub.db.session import Base


class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, index=True, nullable=False)
    overview = Column(String, nullable=True)
    objectives = Column(String, nullable=True)
    tech_stack = Column(String, nullable=True)
    # Set once at creation; not a foreign key because team deletion does not cascade
    team_id = Column(Integer, index=True, nullable=False)
    repo_name = Column(String, nullable=True)
    repo_owner = Column(String, nullable=True)
    repo_initialized = Column(Boolean, default=False, nullable=False)
    announcements = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    # Relationships
    tasks = relationship("Task", back_populates="project", order_by="Task.id")

    @property
    def task_ids(self):
        return [task.id for task in self.tasks]
