"""
catalog_service.py: Recommendation catalog
The fixed table of wellness activities and the levels each one applies to.
Seeded once at startup; never edited afterwards.
"""

import logging

from sqlalchemy.orm import Session
from models.wellness_activity import WellnessActivity

logger = logging.getLogger(__name__)

WELLNESS_CATALOG = [
    {"id": 1, "activity": "Physical activity (e.g., walking or exercise)", "source": "NHS exercise guidelines", "priority": ["high", "moderate"]},
    {"id": 2, "activity": "Mindfulness or meditation", "source": "NHS mindfulness guide", "priority": ["high", "mild"]},
    {"id": 3, "activity": "Connect with others socially", "source": "APA social connections", "priority": ["low", "mild"]},
    {"id": 4, "activity": "Get restorative sleep", "source": "APA lifestyle page", "priority": ["all"]},
    {"id": 5, "activity": "Practice gratitude or journaling", "source": "Greater Good Health routines", "priority": ["moderate", "low"]},
    {"id": 6, "activity": "Healthy eating", "source": "APA nutrition info", "priority": ["high"]},
]


def seed_catalog(db: Session) -> int:
    """Insert any catalog rows missing by id. Returns how many were added."""
    inserted = 0
    try:
        for entry in WELLNESS_CATALOG:
            if db.get(WellnessActivity, entry["id"]) is None:
                db.add(WellnessActivity(**entry))
                inserted += 1
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("Catalog seeding failed")
        raise
    return inserted


def list_activities(db: Session) -> list[dict]:
    """All catalog rows in ascending id order."""
    rows = db.query(WellnessActivity).order_by(WellnessActivity.id.asc()).all()
    return [row.to_dict() for row in rows]
