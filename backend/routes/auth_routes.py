# ---------- routes/auth_routes.py ----------
"""
Auth routes: registration and credential checks.
No token is issued; every call proves identity with email + password.
"""
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session

from database import get_db
from services.user_service import UserService

router = APIRouter(prefix="/api", tags=["Auth"])


# ── Pydantic schemas ──────────────────────────────────────────────
class RegisterRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


# ── Routes ────────────────────────────────────────────────────────
@router.post("/register")
def register(body: Optional[RegisterRequest] = None, db: Session = Depends(get_db)):
    """Create an account. Email is stored lowercase and must be unique."""
    body = body or RegisterRequest()
    user = UserService.register(db, body.name, body.email, body.password)
    return {"success": True, "user": user.to_public_dict(include_scores=False)}


@router.post("/login")
def login(body: Optional[LoginRequest] = None, db: Session = Depends(get_db)):
    """Check email + password and return the profile with its score ledger."""
    body = body or LoginRequest()
    user = UserService.login(db, body.email, body.password)
    return {"success": True, "user": user.to_public_dict()}
