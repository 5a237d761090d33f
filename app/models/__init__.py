from .admin_user import AdminUser
from .blog import BlogPost, BlogPostTranslation, PublicationStatus
from .event import Event, EventStatus, EventTranslation
from .member import Member, MembershipType, MemberStatus
from .resource import Resource, ResourceTranslation

__all__ = [
    "AdminUser",
    "BlogPost",
    "BlogPostTranslation",
    "Event",
    "EventStatus",
    "EventTranslation",
    "Member",
    "MemberStatus",
    "MembershipType",
    "PublicationStatus",
    "Resource",
    "ResourceTranslation",
]
