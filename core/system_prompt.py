from typing import Optional
from config.settings import OWNER_NAME, OWNER_SHORT_NAME, OWNER_EMAIL, OWNER_LOCATION
from core.text_processing import split_sentences
from models.portfolio import PortfolioSnapshot

FALLBACK_TITLE = "Software Developer & Data Engineer"
FALLBACK_BIO = ("Passionate about technology and innovation, I specialize in building scalable "
                "applications and solving complex problems.")

FALLBACK_ABOUT = """- Full-Stack Developer & Data Engineer with 3+ years of experience
- B.Tech EEE graduate from NIT Silchar
- Specializes in Java, Python, React, and cloud technologies
- Expertise in building scalable web applications, data pipelines, and AI solutions
- Strong experience with Spring Boot, React, MongoDB, Apache Kafka, AI/ML frameworks
- Has worked at Infosys as a System Engineer"""

FALLBACK_SKILLS = """Key Skills:
- Backend: Java, Python, Spring Boot, Django, FastAPI
- Frontend: React, JavaScript, HTML5, CSS3, Tailwind CSS
- Databases: MongoDB, MySQL, PostgreSQL
- Data Engineering: Apache Kafka, Apache Spark, Hadoop
- AI/ML: TensorFlow, PyTorch, LangChain, OpenAI
- Cloud: Google Cloud, AWS, Docker, Kubernetes"""

FALLBACK_PROJECTS = """Projects:
- Customer 360 Analytics Platform (React + Spring Boot)
- Task Manager Dashboard (Full-stack with Django)
- RAG-Powered AI Knowledge Assistant (LangChain + OpenAI)
- Credit Card Fraud Detection System (Python + ML)
- Tesla Stock Analysis (Data Science)
- Construction Management System"""

FALLBACK_EXPERIENCE = """Experience:
- System Engineer at Infosys (2021-2023): Worked on enterprise applications and system integration
- Full-Stack Developer (2023-Present): Building scalable web applications and AI solutions"""

MAX_PROMPT_PROJECTS = 6
MAX_PROMPT_EXPERIENCE = 5


def _about_block(snapshot: PortfolioSnapshot) -> str:
    about = snapshot.about
    if not about:
        return FALLBACK_ABOUT
    bio = split_sentences(about.bio, 3) if about.bio else FALLBACK_BIO
    return "\n".join([
        f"- {about.name or OWNER_NAME}",
        f"- {about.title or FALLBACK_TITLE}",
        f"- {bio}",
        f"- Location: {about.location or OWNER_LOCATION}",
        f"- Email: {about.email or OWNER_EMAIL}",
    ])


def _skills_block(snapshot: PortfolioSnapshot) -> str:
    if not snapshot.about or not snapshot.about.expertise:
        return FALLBACK_SKILLS
    skills = [s.strip() for s in snapshot.about.expertise.split("•") if s.strip()]
    return "Key Skills:\n" + "\n".join(f"- {s}" for s in skills)


def _projects_block(snapshot: PortfolioSnapshot) -> str:
    if snapshot.projects is None:
        return FALLBACK_PROJECTS
    lines = []
    for project in snapshot.projects[:MAX_PROMPT_PROJECTS]:
        technologies = project.technologies
        if isinstance(technologies, (list, tuple)):
            technologies = ", ".join(str(t) for t in technologies)
        detail = project.description or technologies or "A featured project"
        lines.append(f"- {project.title}: {detail}")
    return "Projects:\n" + "\n".join(lines)


def _experience_block(snapshot: PortfolioSnapshot) -> str:
    if snapshot.experience is None:
        return FALLBACK_EXPERIENCE
    lines = []
    for exp in snapshot.experience[:MAX_PROMPT_EXPERIENCE]:
        detail = exp.description or "Key role in software development"
        lines.append(f"- {exp.position} at {exp.company} ({exp.duration}): {detail}")
    return "Experience:\n" + "\n".join(lines)


def build_system_prompt(snapshot: Optional[PortfolioSnapshot] = None) -> str:
    """Grounding prompt for the portfolio assistant, built from whatever content is loaded."""
    snapshot = snapshot or PortfolioSnapshot()
    owner = OWNER_SHORT_NAME
    email = (snapshot.about and snapshot.about.email) or OWNER_EMAIL
    location = (snapshot.about and snapshot.about.location) or OWNER_LOCATION

    return f"""You are {owner}'s AI assistant for the portfolio website. You are helpful, friendly, and knowledgeable about {owner}'s background, skills, projects, and experience.

About {owner}:
{_about_block(snapshot)}

{_skills_block(snapshot)}

{_projects_block(snapshot)}

{_experience_block(snapshot)}

Contact:
- Email: {email}
- Location: {location}
- Always encourage using the contact form for detailed inquiries

Guidelines:
- Be conversational and friendly
- Provide accurate information about {owner}'s background, education and work experience
- Encourage visitors to explore the portfolio sections
- If asked about something not related to {owner}'s portfolio, politely redirect to relevant topics
- Keep responses concise but informative
- Use emojis sparingly and appropriately"""
