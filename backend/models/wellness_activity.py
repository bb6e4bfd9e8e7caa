from sqlalchemy import Column, Integer, String, Text
from database import Base
from models.types import JSONList


class WellnessActivity(Base):
    __tablename__ = "ra_wellness"

    id = Column(Integer, primary_key=True, autoincrement=False)
    activity = Column(Text, nullable=False)
    source = Column(String(255), nullable=False)
    priority = Column(JSONList, nullable=False)  # levels this activity applies to, or ["all"]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "activity": self.activity,
            "source": self.source,
            "priority": list(self.priority or []),
        }
