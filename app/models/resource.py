from sqlalchemy import JSON, Column, ForeignKey, Index, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from app.database import Base
from app.models.blog import PublicationStatus
from app.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class Resource(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """A downloadable document (guide, report, standard) offered on the resources page."""

    __tablename__ = "resources"

    slug = Column(String, unique=True, nullable=False)
    file_url = Column(String, nullable=False)
    file_size = Column(Integer, nullable=True)
    file_type = Column(String, nullable=True)
    downloads = Column(Integer, nullable=False, default=0)
    status = Column(String(20), nullable=False, default=PublicationStatus.draft.value)

    translations = relationship(
        "ResourceTranslation",
        back_populates="resource",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (Index("idx_resources_status", "status"),)


class ResourceTranslation(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "resource_translations"

    resource_id = Column(String(36), ForeignKey("resources.id", ondelete="CASCADE"), nullable=False, index=True)
    language = Column(String(2), nullable=False)

    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    type = Column(String, nullable=True)
    category = Column(String, nullable=True)
    tags = Column(JSON(none_as_null=True), nullable=True)

    resource = relationship("Resource", back_populates="translations")

    __table_args__ = (
        UniqueConstraint("resource_id", "language", name="uq_resource_translation_language"),
        Index("idx_resource_translations_language", "language"),
    )
