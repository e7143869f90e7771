from fastapi import APIRouter, HTTPException, Depends

from schemas.user_schema import UserCreate, UserInfo
from services.firebase_service import create_user_in_firebase, EmailAlreadyInUse
from services import plan_service
from core.security import get_current_user

router = APIRouter(
    prefix="/auth",
    tags=["Authentication"],
    responses={404: {"description": "Not found"}},
)

@router.post("/signup", response_model=UserInfo)
async def signup(user: UserCreate):
    """Signs up a new user on the free plan."""
    try:
        return create_user_in_firebase(user.email, user.password, user.full_name)
    except EmailAlreadyInUse as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"An unexpected error occurred: {e}")


@router.get("/me", response_model=UserInfo)
async def read_users_me(current_user: dict = Depends(get_current_user)):
    """
    Get the profile and plan of the currently authenticated user.
    """
    return UserInfo(
        uid=current_user['uid'],
        email=current_user.get('email'),
        full_name=current_user.get('name'),
        plan=plan_service.get_user_plan(current_user['uid']).value
    )
