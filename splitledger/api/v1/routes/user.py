from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from splitledger.core.dependencies import get_db, get_path_user
from splitledger.schemas.user import UserCreate, UserOut
from splitledger.services.user_service import create_user


router = APIRouter()


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
async def register_user(
    data: UserCreate,
    db: AsyncSession = Depends(get_db),
):
    return await create_user(db, data)


@router.get("/{user_id}", response_model=UserOut)
async def get_user_details(user = Depends(get_path_user)):
    return user
