from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database import get_db
from services.catalog_service import list_activities
from services.plan_service import build_plan, parse_score

router = APIRouter(prefix="/api", tags=["Plan"])


@router.get("/plan/{score}")
def get_plan(score: str, db: Session = Depends(get_db)):
    """
    What-if planner: the score comes from the URL, not the caller's ledger.
    Returns up to three recommendations plus the full catalog.
    """
    value = parse_score(score)
    return build_plan(value, list_activities(db))
