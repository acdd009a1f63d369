from pydantic import BaseModel, EmailStr, Field
from datetime import datetime

MOBILE_PATTERN = r"^\+?[1-9]\d{6,14}$"

class UserBase(BaseModel):
    email: EmailStr
    name: str = Field(min_length=1)
    mobile: str = Field(pattern=MOBILE_PATTERN)

class UserCreate(UserBase):
    pass

class UserOut(UserBase):
    id: int
    serial_id: int
    created_at: datetime | None = None

    class Config:
        from_attributes = True
