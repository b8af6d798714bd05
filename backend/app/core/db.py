from sqlmodel import Session, SQLModel, create_engine

from app.core.config import settings

connect_args = {}
if settings.SQLALCHEMY_DATABASE_URI.startswith("sqlite"):
    # Requests are served from a threadpool
    connect_args["check_same_thread"] = False

engine = create_engine(settings.SQLALCHEMY_DATABASE_URI, connect_args=connect_args)


def init_db(session: Session) -> None:
    # Tables are created directly from the SQLModel metadata, there are no migrations
    from app import models  # noqa: F401

    SQLModel.metadata.create_all(session.get_bind())
