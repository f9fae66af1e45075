"""
View models for the page sections.

Each function takes already-fetched backend records and returns plain
JSON-ready dicts; nothing here touches the network or the theme.
"""
from typing import Any, Dict, List, Optional
from config.settings import HERO_ROLES, OWNER_NAME, OWNER_EMAIL, OWNER_LOCATION
from core.text_processing import format_month_year
from core.typewriter import typewriter_schedule, TYPING_MS, DELETING_MS, PAUSE_MS
from models.portfolio import About, Skill, Project, Experience, parse_record, parse_records

PROJECTS_PAGE_SIZE = 6

NAV_ITEMS = [
    {"name": "Home", "href": "#home"},
    {"name": "About", "href": "#about"},
    {"name": "Skills", "href": "#skills"},
    {"name": "Experience", "href": "#experience"},
    {"name": "Projects", "href": "#projects"},
    {"name": "Contact", "href": "#contact"},
]

SKILL_CATEGORIES = {
    "coding": {
        "label": "Backend & Programming",
        "percentage": 90,
        "skills": ["Java", "Python", "Spring Boot", "Hibernate", "Django", "FastAPI"],
    },
    "design": {
        "label": "Design & Frontend",
        "percentage": 85,
        "skills": ["HTML5", "CSS3", "JavaScript", "React JS", "Tailwind CSS"],
    },
    "data": {
        "label": "Data & DevOps",
        "percentage": 95,
        "skills": ["MongoDB", "MySQL", "Apache Kafka", "Apache Spark", "Docker"],
    },
    "ai": {
        "label": "AI & Machine Learning",
        "percentage": 80,
        "skills": ["LLM", "RAG", "LangChain", "Hugging Face", "OpenAI API", "Anthropic",
                   "Google AI", "TensorFlow", "PyTorch"],
    },
}


def _dump(record) -> Dict[str, Any]:
    return record.model_dump(mode="json", exclude_none=True)


def hero_section(roles: Optional[List[str]] = None, about: Optional[About] = None) -> dict:
    roles = roles or HERO_ROLES
    return {
        "name": (about and about.name) or OWNER_NAME,
        "tagline": about.tagline if about else None,
        "roles": roles,
        "typewriter": {
            "typing_ms": TYPING_MS,
            "deleting_ms": DELETING_MS,
            "pause_ms": PAUSE_MS,
            "frames": typewriter_schedule(roles),
        },
    }


def about_section(items: List[dict]) -> dict:
    about = parse_record(About, items[0]) if items else None
    if about is None:
        return {"about": None, "loading": False}
    expertise = [s.strip() for s in (about.expertise or "").split("•") if s.strip()]
    paragraphs = [p.strip() for p in (about.bio or "").split("\n") if p.strip()]
    return {
        "about": _dump(about),
        "bio_paragraphs": paragraphs,
        "expertise": expertise,
        "loading": False,
    }


def skills_section(items: List[dict], selected: str = "coding") -> dict:
    fetched: Dict[str, List[dict]] = {}
    for skill in parse_records(Skill, items):
        fetched.setdefault(skill.category or "other", []).append(_dump(skill))

    categories = []
    for key, category in SKILL_CATEGORIES.items():
        categories.append({
            "key": key,
            "label": category["label"],
            "percentage": category["percentage"],
            "skills": category["skills"],
            "count": len(category["skills"]),
        })

    if selected not in SKILL_CATEGORIES:
        selected = "coding"
    return {"selected": selected, "categories": categories, "skills_by_category": fetched}


def projects_section(items: List[dict], category: str = "all", limit: int = PROJECTS_PAGE_SIZE) -> dict:
    projects = parse_records(Project, items)

    categories = ["all"]
    for project in projects:
        if project.category and project.category not in categories:
            categories.append(project.category)

    filtered = projects if category == "all" else [p for p in projects if p.category == category]
    return {
        "categories": categories,
        "filter": category,
        "projects": [_dump(p) for p in filtered[:limit]],
        "total": len(filtered),
        "has_more": len(filtered) > limit,
        "next_limit": limit + PROJECTS_PAGE_SIZE,
        "empty": not filtered,
    }


def experience_section(items: List[dict]) -> dict:
    entries = []
    for exp in parse_records(Experience, items):
        entry = _dump(exp)
        entry["start_label"] = format_month_year(exp.start_date) if exp.start_date else None
        entry["end_label"] = "Present" if exp.current else format_month_year(exp.end_date)
        entries.append(entry)
    return {"experience": entries}


def navbar() -> dict:
    return {"items": NAV_ITEMS, "brand": OWNER_NAME}


def footer(about: Optional[About], year: int) -> dict:
    about = about or About()
    links = []
    if about.github_url:
        links.append({"name": "GitHub", "href": about.github_url})
    if about.linkedin_url:
        links.append({"name": "LinkedIn", "href": about.linkedin_url})
    email = about.email or OWNER_EMAIL
    links.append({"name": "Email", "href": f"mailto:{email}"})
    return {
        "name": about.name or OWNER_NAME,
        "location": about.location or OWNER_LOCATION,
        "links": links,
        "quick_links": NAV_ITEMS,
        "year": year,
        "scroll_to_top": "#home",
    }
