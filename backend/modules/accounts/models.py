"""
Accounts module data models.

These models define the data structures used by the accounts module
and exposed to other modules through the interface.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field


class UserAccount(BaseModel):
    """
    A stored end-user account.

    Holds the password hash and activation link, so it never leaves the
    service layer; callers receive a UserDto instead.
    """

    id: str = Field(..., description="User ID")
    email: EmailStr = Field(..., description="Email address (unique)")
    password_hash: str = Field(..., description="Password digest")
    is_activated: bool = Field(default=False, description="Whether the account is activated")
    activation_link: Optional[str] = Field(None, description="Activation link token")

    display_name: Optional[str] = Field(None, description="Display name")
    location: Optional[str] = Field(None, description="Free-form location")

    notify_about_product_updates: bool = Field(default=False)
    notify_about_market_newsletter: bool = Field(default=False)
    notify_about_comments: bool = Field(default=False)
    notify_about_purchases: bool = Field(default=False)

    created_at: Optional[datetime] = Field(None, description="Account creation time")
    updated_at: Optional[datetime] = Field(None, description="Last update time")


class UserDto(BaseModel):
    """Public, read-only projection of a UserAccount."""

    id: str
    email: EmailStr
    is_activated: bool
    display_name: Optional[str] = None
    location: Optional[str] = None
    notify_about_product_updates: bool = False
    notify_about_market_newsletter: bool = False
    notify_about_comments: bool = False
    notify_about_purchases: bool = False

    model_config = {"frozen": True}

    @classmethod
    def from_account(cls, account: UserAccount) -> "UserDto":
        return cls(**account.model_dump(include=set(cls.model_fields)))


class ProfileUpdate(BaseModel):
    """
    Profile fields a user may change.

    Only fields that were explicitly supplied are written to the store.
    """

    email: Optional[EmailStr] = None
    display_name: Optional[str] = None
    location: Optional[str] = None
    notify_about_product_updates: Optional[bool] = None
    notify_about_market_newsletter: Optional[bool] = None
    notify_about_comments: Optional[bool] = None
    notify_about_purchases: Optional[bool] = None

    def to_patch(self) -> dict:
        patch = self.model_dump(exclude_unset=True)
        # email is a required column; an explicit null is not a change
        if patch.get("email") is None:
            patch.pop("email", None)
        return patch


class PasswordChange(BaseModel):
    """Request to replace the current password."""

    old_password: str
    new_password: str
    confirm_new_password: str
