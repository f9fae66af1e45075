from fastapi import APIRouter
from pydantic import BaseModel
from api.theme_routes import router as theme_router
from api.section_routes import router as section_router
from api.contact_routes import router as contact_router
from api.chat_routes import router as chat_router

router = APIRouter()

class HealthResponse(BaseModel):
    status: str

# Include all route modules
router.include_router(theme_router)
router.include_router(section_router)
router.include_router(contact_router)
router.include_router(chat_router)


@router.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok")
