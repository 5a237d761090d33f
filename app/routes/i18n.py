from fastapi import APIRouter, Request

from app.i18n import get_language_info
from app.schemas.common import LanguagesResponse

router = APIRouter()


@router.get("/languages", response_model=LanguagesResponse)
async def list_languages(request: Request):
    """Languages content can be requested in, with their writing direction."""
    settings = request.app.state.settings
    return {
        "default": settings.default_language,
        "languages": [get_language_info(code) for code in settings.supported_languages],
    }
