# ============================================================================
# FILE: tracknest/db/base.py
# ============================================================================
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Import all models so Base.metadata sees every table before create_all
def import_models():
    from tracknest.db.models import user, catalog, playlist, like, chart  # noqa: F401
