from typing import Optional, Union

from fastapi import APIRouter, Depends
from pydantic import BaseModel, FiniteFloat
from sqlalchemy.orm import Session

from database import get_db
from services.user_service import UserService

router = APIRouter(prefix="/api", tags=["Profile"])


class ScoreSubmit(BaseModel):
    # inf/NaN would be stored but could never be rendered back as JSON
    score: Optional[Union[int, FiniteFloat]] = None


@router.get("/profile/{user_id}")
def get_profile(user_id: int, db: Session = Depends(get_db)):
    user = UserService.get_by_id(db, user_id)
    return user.to_public_dict()


@router.post("/score/{user_id}")
def submit_score(user_id: int, body: Optional[ScoreSubmit] = None, db: Session = Depends(get_db)):
    score = body.score if body else None
    UserService.add_score(db, user_id, score)
    return {"success": True}
