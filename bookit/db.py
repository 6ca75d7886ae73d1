# bookit/db.py

from sqlmodel import SQLModel, create_engine

from bookit.config import settings
from bookit import models  # noqa: F401  registers StoreEntry


def make_engine(url: str = settings.database_url):
    connect_args = {}
    if url.startswith("sqlite"):
        # required for SQLite when the store is shared across threads
        connect_args["check_same_thread"] = False
    return create_engine(url, echo=False, connect_args=connect_args)


# SQLite database (file-based) holding the client-side collections
engine = make_engine()


def init_db(bind=None) -> None:
    SQLModel.metadata.create_all(bind if bind is not None else engine)
