from sqlmodel import SQLModel, create_engine # pyright: ignore[reportMissingImports]
from config.settings import DATABASE_URL


def make_engine(url: str = DATABASE_URL):
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args)


engine = make_engine()

def create_db_and_tables(bind=None):
    # Import all models here to ensure they're registered
    from models.preferences import Preference

    SQLModel.metadata.create_all(bind or engine)
