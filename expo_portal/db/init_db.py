from expo_portal.db.base import Base
from expo_portal.db.session import engine


def init_db() -> None:
    Base.metadata.create_all(bind=engine)
