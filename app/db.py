# app/db.py

import logging

from sqlmodel import SQLModel, Session, create_engine, select

from app.config import settings

logger = logging.getLogger(__name__)

# SQLite needs this when FastAPI hands the session to a worker thread
connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

# Engine = connection to the database
engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.SQL_ECHO,
    connect_args=connect_args,
)


# Dependency: one session per request
def get_session():
    with Session(engine) as session:
        yield session


def init_db(bind=None):
    """Create tables and, when configured, the bootstrap admin account."""
    from app.auth import hash_password
    from app.models import User

    bind = bind or engine
    SQLModel.metadata.create_all(bind)

    if not (settings.ADMIN_EMAIL and settings.ADMIN_PASSWORD):
        return

    # stored the way registration and login normalize it
    email = settings.ADMIN_EMAIL.strip().lower()

    with Session(bind) as session:
        existing = session.exec(
            select(User).where(User.email == email)
        ).first()
        if existing is None:
            session.add(User(
                email=email,
                name="Admin",
                password_hash=hash_password(settings.ADMIN_PASSWORD),
                role="admin",
            ))
            session.commit()
            logger.info("Created bootstrap admin %s", email)
