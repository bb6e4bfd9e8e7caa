from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, DateTime
from database import Base
from models.types import JSONList


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), unique=True, nullable=False, index=True)  # always lowercase
    password = Column(String(255), nullable=False)  # bcrypt hash
    name = Column(String(255), nullable=False)
    scores = Column(JSONList, nullable=False, default=lambda: [])  # append-only, oldest first
    created = Column(DateTime, default=lambda: datetime.now(timezone.utc))

    def to_public_dict(self, include_scores: bool = True) -> dict:
        data = {"id": self.id, "name": self.name, "email": self.email}
        if include_scores:
            data["scores"] = list(self.scores or [])
        return data
