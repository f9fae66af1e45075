from sqlmodel import SQLModel, Field # pyright: ignore[reportMissingImports]
from datetime import datetime, timezone


class Preference(SQLModel, table=True):
    __tablename__ = "preferences"

    key: str = Field(primary_key=True)
    value: str
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
