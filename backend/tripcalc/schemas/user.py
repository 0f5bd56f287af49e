"""
Pydantic schemas for User entity.
"""
from pydantic import BaseModel, EmailStr, Field
from typing import List, Optional
from datetime import datetime


class UserResponse(BaseModel):
    """Schema for user response."""
    id: int
    email: EmailStr
    name: Optional[str] = None
    image: Optional[str] = None
    is_premium: bool
    is_admin: bool
    created_at: datetime

    class Config:
        from_attributes = True


class UserUpdate(BaseModel):
    """Schema for profile update. Omitted or null fields are left unchanged."""
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None


class UserStats(BaseModel):
    """Profile counters."""
    total_trips: int
    shared_trips: int  # trips that ever got a share link
    total_expenses: int


class AdminUserResponse(UserResponse):
    """User row in the admin list."""
    trip_count: int = 0


class AdminUserStats(BaseModel):
    """Account counts for the admin dashboard."""
    total: int
    premium: int
    admins: int


class AdminUserList(BaseModel):
    """Schema for admin user listing."""
    users: List[AdminUserResponse]
    stats: AdminUserStats


class AdminUserUpdate(BaseModel):
    """Schema for toggling account flags."""
    is_premium: Optional[bool] = None
    is_admin: Optional[bool] = None
