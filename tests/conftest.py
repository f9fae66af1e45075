import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("PORTFOLIO_API_ENDPOINT", "http://portfolio.test")

from unittest.mock import MagicMock

import pytest
from langchain_core.messages import AIMessage
from sqlalchemy.pool import StaticPool
from sqlmodel import create_engine

from bots.base_bot import CompletionBot
from models.database import create_db_and_tables
from models.portfolio import Single, Collection
from services.portfolio_api import PortfolioClient


VALID_DRAFT = {
    "name": "Raj Singh",
    "email": "raj@gmail.com",
    "subject": "Project collaboration",
    "message": "Hello, I would like to talk about a data pipeline project.",
}

ABOUT = {
    "name": "Raj Shekhar Singh",
    "title": "Software Developer",
    "bio": "I build data platforms. I like Kafka. I also write React. This sentence is dropped.",
    "email": "raj@gmail.com",
    "location": "Bangalore, India",
    "githubUrl": "https://github.com/raj",
    "linkedinUrl": "https://linkedin.com/in/raj",
    "expertise": "Java • Python • Apache Kafka",
    "tagline": "Building things",
}

PROJECTS = [
    {"_id": "p1", "title": "Customer 360", "description": "Analytics platform", "category": "web", "featured": True},
    {"_id": "p2", "title": "Fraud Detection", "technologies": "Python, ML", "category": "ai"},
    {"_id": "p3", "title": "Task Manager", "category": "web"},
]

EXPERIENCE = [
    {"id": 1, "position": "System Engineer", "company": "Infosys", "duration": "2021-2023",
     "startDate": "2021-07-01", "endDate": "2023-06-30", "description": "Enterprise integration"},
    {"id": 2, "position": "Data Engineer", "company": "Acme", "duration": "2023-Present",
     "startDate": "2023-08-01", "current": True},
]

SKILLS = [
    {"name": "Java", "category": "coding"},
    {"name": "React", "category": "design"},
]


@pytest.fixture
def portfolio_client():
    client = MagicMock(spec=PortfolioClient)
    client.get_about_primary.return_value = Single(item=ABOUT)
    client.get_skills.return_value = Collection(items=SKILLS)
    client.get_projects.return_value = Collection(items=PROJECTS)
    client.get_experience.return_value = Collection(items=EXPERIENCE)
    client.submit_contact.return_value = None
    client.send_interest_email.return_value = None
    return client


@pytest.fixture
def chat_model():
    model = MagicMock()
    model.invoke.return_value = AIMessage(content="Raj works on data platforms.")
    return model


@pytest.fixture
def completion_bot(chat_model):
    return CompletionBot(api_key=None, chat_model=chat_model)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_db_and_tables(engine)
    return engine
