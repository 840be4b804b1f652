"""Schemas for the contact form."""

from pydantic import BaseModel, EmailStr, Field


class ContactMessage(BaseModel):
    """A visitor's contact form submission."""

    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    message: str = Field(min_length=1, max_length=5000)
