from app.routes.localized import Messages, build_localized_router
from app.schemas.event import EventCreate, EventList, EventOut, EventUpdate
from app.services.content_kinds import EVENTS

# Listed by start_date, soonest first
router = build_localized_router(
    EVENTS,
    create_schema=EventCreate,
    update_schema=EventUpdate,
    item_schema=EventOut,
    list_schema=EventList,
    messages=Messages(
        created="Événement créé avec succès",
        updated="Événement mis à jour avec succès",
        deleted="Événement supprimé avec succès",
    ),
)
