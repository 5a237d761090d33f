"""
BlogPost / BlogPostTranslation

One language-independent ``blog_posts`` row owns zero or more
``blog_post_translations`` rows, at most one per language.
"""

import enum

from sqlalchemy import JSON, Column, ForeignKey, Index, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from app.database import Base
from app.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class PublicationStatus(str, enum.Enum):
    draft = "draft"
    published = "published"
    archived = "archived"


class BlogPost(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "blog_posts"

    slug = Column(String, unique=True, nullable=False)
    status = Column(String(20), nullable=False, default=PublicationStatus.draft.value)
    featured_image = Column(String, nullable=True)
    read_time = Column(Integer, nullable=True)

    # Engagement counters, only touched by increment operations
    views = Column(Integer, nullable=False, default=0)
    likes = Column(Integer, nullable=False, default=0)
    comments = Column(Integer, nullable=False, default=0)

    translations = relationship(
        "BlogPostTranslation",
        back_populates="blog_post",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (Index("idx_blog_posts_status", "status"),)


class BlogPostTranslation(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "blog_post_translations"

    blog_post_id = Column(
        String(36),
        ForeignKey("blog_posts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    language = Column(String(2), nullable=False)

    title = Column(String, nullable=False)
    excerpt = Column(Text, nullable=True)
    content = Column(Text, nullable=True)
    author = Column(String, nullable=True)
    category = Column(String, nullable=True)
    tags = Column(JSON(none_as_null=True), nullable=True)
    seo_title = Column(String, nullable=True)
    seo_description = Column(Text, nullable=True)

    blog_post = relationship("BlogPost", back_populates="translations")

    __table_args__ = (
        # One translation per (blog post, language) pair
        UniqueConstraint("blog_post_id", "language", name="uq_blog_post_translation_language"),
        Index("idx_blog_translations_language", "language"),
    )
