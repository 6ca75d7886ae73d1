# bookit/models.py

from sqlmodel import SQLModel, Field


class StoreEntry(SQLModel, table=True):
    __tablename__ = "store_entry"

    key: str = Field(primary_key=True)
    value: str  # JSON text, always a full overwrite
