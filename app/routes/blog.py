from app.routes.localized import Messages, build_localized_router
from app.schemas.blog import BlogPostCreate, BlogPostList, BlogPostOut, BlogPostUpdate
from app.services.content_kinds import BLOG

router = build_localized_router(
    BLOG,
    create_schema=BlogPostCreate,
    update_schema=BlogPostUpdate,
    item_schema=BlogPostOut,
    list_schema=BlogPostList,
    messages=Messages(
        created="Article créé avec succès",
        updated="Article mis à jour avec succès",
        deleted="Article supprimé avec succès",
    ),
)
