from .blog import BlogPostCreate, BlogPostList, BlogPostOut, BlogPostUpdate
from .common import CategoriesResponse, CreatedResponse, LanguagesResponse, MessageResponse, TagsResponse
from .event import EventCreate, EventList, EventOut, EventUpdate
from .member import MemberCreate, MemberEnvelope, MemberList, MemberOut, MemberStats, MemberUpdate
from .resource import ResourceCreate, ResourceList, ResourceOut, ResourceUpdate
from .token import AdminUserOut, Token

__all__ = [
    "AdminUserOut",
    "BlogPostCreate",
    "BlogPostList",
    "BlogPostOut",
    "BlogPostUpdate",
    "CategoriesResponse",
    "CreatedResponse",
    "EventCreate",
    "EventList",
    "EventOut",
    "EventUpdate",
    "LanguagesResponse",
    "MemberCreate",
    "MemberEnvelope",
    "MemberList",
    "MemberOut",
    "MemberStats",
    "MemberUpdate",
    "MessageResponse",
    "ResourceCreate",
    "ResourceList",
    "ResourceOut",
    "ResourceUpdate",
    "TagsResponse",
    "Token",
]
