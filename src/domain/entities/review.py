"""
AppRating Entity

A rating left by an app user, optionally tagged with a sentiment label.
"""

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field

from src.domain.base import DocumentModel


class AppRating(DocumentModel):
    COLLECTION: ClassVar[str] = "app_ratings"

    id: str = ""
    user_id: str = Field(default="", alias="userId")
    user_name: str = Field(default="", alias="userName")
    user_email: str = Field(default="", alias="userEmail")
    rating: int = 0
    feedback: str = ""
    platform: str = ""
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    sentiment: Optional[str] = None
    sentiment_confidence: Optional[float] = Field(default=None, alias="sentimentConfidence")
