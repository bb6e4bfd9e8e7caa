# Import all models so they register with SQLAlchemy Base.metadata
# This ensures Base.metadata.create_all() creates all tables

from models.user import User
from models.wellness_activity import WellnessActivity

__all__ = [
    "User",
    "WellnessActivity",
]
