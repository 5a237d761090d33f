from app.routes.localized import Messages, build_localized_router, resource_filters
from app.schemas.resource import ResourceCreate, ResourceList, ResourceOut, ResourceUpdate
from app.services.content_kinds import RESOURCES

router = build_localized_router(
    RESOURCES,
    create_schema=ResourceCreate,
    update_schema=ResourceUpdate,
    item_schema=ResourceOut,
    list_schema=ResourceList,
    messages=Messages(
        created="Ressource créée avec succès",
        updated="Ressource mise à jour avec succès",
        deleted="Ressource supprimée avec succès",
    ),
    filters=resource_filters,
)
