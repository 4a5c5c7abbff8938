# teamhub/models/team.py
from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Table, func
from sqlalchemy.orm import relationship

from teamhub.db.session import Base


team_members = Table(
    "team_members",
    Base.metadata,
    Column("team_id", Integer, ForeignKey("teams.id", ondelete="CASCADE"), primary_key=True),
    Column("user_id", Integer, ForeignKey("users.id"), primary_key=True),
)


class Team(Base):
    __tablename__ = "teams"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, index=True, nullable=False)
    description = Column(String, nullable=True)
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    # Relationships
    owner = relationship("User")
    members = relationship("User", secondary=team_members, order_by="User.id")
    # Projects hold a plain team id, so deleting a team leaves them in place
    projects = relationship(
        "Project",
        primaryjoin="Team.id == foreign(Project.team_id)",
        order_by="Project.id",
        viewonly=True,
    )

    @property
    def member_ids(self):
        return [member.id for member in self.members]

    @property
    def project_ids(self):
        return [project.id for project in self.projects]

    def has_member(self, user_id: int) -> bool:
        return user_id in self.member_ids
