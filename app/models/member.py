import enum

from sqlalchemy import Column, Index, String

from app.database import Base
from app.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class MemberStatus(str, enum.Enum):
    pending = "pending"
    active = "active"
    inactive = "inactive"


class MembershipType(str, enum.Enum):
    individual = "individual"
    corporate = "corporate"
    student = "student"


class Member(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "members"

    email = Column(String, unique=True, nullable=False)
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)
    company = Column(String, nullable=True)
    position = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    membership_type = Column(String, nullable=True)
    status = Column(String(20), nullable=False, default=MemberStatus.pending.value)

    __table_args__ = (Index("idx_members_status", "status"),)
