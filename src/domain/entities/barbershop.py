"""
Barbershop Entity

The operational storefront created once per approved tenant.
"""

from datetime import datetime
from typing import ClassVar, List, Optional

from pydantic import Field

from src.domain.base import DocumentModel

DEFAULT_BARBERSHOP_IMAGE = (
    "https://firebasestorage.googleapis.com/v0/b/geges-smartbarber-project.appspot.com"
    "/o/defaults%2Fbarbershop_placeholder.png?alt=media&token=default"
)
DEFAULT_SERVICES = ["Potong Rambut", "Cukur Jenggot"]
DEFAULT_FACILITIES = ["AC", "Parkir", "Wifi"]
DEFAULT_OPEN_HOUR = 9
DEFAULT_CLOSE_HOUR = 21
DEFAULT_ADDRESS = "Alamat belum diatur"


class Barbershop(DocumentModel):
    """
    Barbershop entity - owned by exactly one admin_owner user.

    Business Rules:
    - admin_uid and User.barbershop_id link shop and owner both ways
    - is_active mirrors the owning tenant's subscription (active/suspended)
    - a new shop starts closed until the owner configures it
    """

    COLLECTION: ClassVar[str] = "barbershops"

    id: str = ""
    name: str = ""
    address: str = DEFAULT_ADDRESS
    whatsapp_number: str = ""
    admin_uid: str = ""

    rating: float = 5.0
    image_url: str = Field(default=DEFAULT_BARBERSHOP_IMAGE, alias="imageUrl")
    gallery_urls: List[str] = Field(default_factory=list)
    services: List[str] = Field(default_factory=lambda: list(DEFAULT_SERVICES))
    facilities: List[str] = Field(default_factory=lambda: list(DEFAULT_FACILITIES))
    is_open: bool = Field(default=False, alias="isOpen")
    is_active: bool = Field(default=True, alias="isActive")
    open_hour: int = DEFAULT_OPEN_HOUR
    close_hour: int = DEFAULT_CLOSE_HOUR
    weekly_holidays: List[int] = Field(default_factory=list)
    barber_selection_fee: float = 0
    google_maps_url: str = ""
    created_at: Optional[datetime] = None
