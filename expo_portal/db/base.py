# Base with every model registered on its metadata (used by init_db, tests and alembic)
from expo_portal.db.base_class import Base  # noqa: F401
from expo_portal.models import project, submission, user  # noqa: F401
