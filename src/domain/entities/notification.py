"""
Notification Entity

A message addressed to a user account, delivered by the mobile apps.
"""

from datetime import datetime
from typing import ClassVar, Optional

from src.domain.base import DocumentModel


class Notification(DocumentModel):
    COLLECTION: ClassVar[str] = "notifications"

    id: str = ""
    user_id: str
    title: str
    body: str
    delivered: bool = False
    created_at: Optional[datetime] = None
