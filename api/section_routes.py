from fastapi import APIRouter, HTTPException, Depends, Query
from datetime import datetime
from typing import Optional
import logging
from api.dependencies import get_content_cache
from core import sections
from models.portfolio import About, parse_record
from services.content_cache import ContentCache
from services.portfolio_api import PortfolioAPIError

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/sections", tags=["sections"])


def _items(content: ContentCache, resource: str):
    try:
        return content.get(resource).items
    except PortfolioAPIError as e:
        logger.error(f"Failed to load {resource}: {e}")
        raise HTTPException(502, f"Could not load {resource}")


def _about_or_none(content: ContentCache) -> Optional[About]:
    try:
        items = content.get("about").items
    except PortfolioAPIError as e:
        logger.warning(f"About content unavailable: {e}")
        return None
    return parse_record(About, items[0]) if items else None


@router.get("/navbar")
def get_navbar():
    return sections.navbar()


@router.get("/hero")
def get_hero(content: ContentCache = Depends(get_content_cache)):
    return sections.hero_section(about=_about_or_none(content))


@router.get("/about")
def get_about(content: ContentCache = Depends(get_content_cache)):
    return sections.about_section(_items(content, "about"))


@router.get("/skills")
def get_skills(selected: str = "coding", content: ContentCache = Depends(get_content_cache)):
    return sections.skills_section(_items(content, "skills"), selected=selected)


@router.get("/projects")
def get_projects(
    category: str = "all",
    limit: int = Query(sections.PROJECTS_PAGE_SIZE, ge=1, le=100),
    content: ContentCache = Depends(get_content_cache),
):
    return sections.projects_section(_items(content, "projects"), category=category, limit=limit)


@router.get("/experience")
def get_experience(content: ContentCache = Depends(get_content_cache)):
    return sections.experience_section(_items(content, "experience"))


@router.get("/footer")
def get_footer(content: ContentCache = Depends(get_content_cache)):
    return sections.footer(_about_or_none(content), datetime.now().year)
