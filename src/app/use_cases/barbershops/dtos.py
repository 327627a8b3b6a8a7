"""
Barbershop Use Case DTOs
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from src.domain.entities import Barbershop


class BarbershopStatusCommand(BaseModel):
    is_active: bool
    reason: str = ""


class BarbershopStatusResponse(BaseModel):
    """Result of activating / deactivating a barbershop"""

    shop_id: str
    is_active: bool
    owner_id: Optional[str] = None
    tenants_updated: List[str] = []


class DeleteBarbershopResponse(BaseModel):
    shop_id: str
    deleted_tenant_ids: List[str] = []
    deleted_owner_id: Optional[str] = None


class BarbershopInfo(BaseModel):
    id: str
    name: str
    address: str
    whatsapp_number: str
    admin_uid: str
    rating: float
    image_url: str
    gallery_urls: List[str] = []
    services: List[str] = []
    facilities: List[str] = []
    is_open: bool
    is_active: bool
    open_hour: int
    close_hour: int
    weekly_holidays: List[int] = []
    barber_selection_fee: float
    google_maps_url: str = ""
    created_at: Optional[str] = None

    @classmethod
    def from_entity(cls, shop: Barbershop) -> "BarbershopInfo":
        return cls(
            id=shop.id,
            name=shop.name,
            address=shop.address,
            whatsapp_number=shop.whatsapp_number,
            admin_uid=shop.admin_uid,
            rating=shop.rating,
            image_url=shop.image_url,
            gallery_urls=shop.gallery_urls,
            services=shop.services,
            facilities=shop.facilities,
            is_open=shop.is_open,
            is_active=shop.is_active,
            open_hour=shop.open_hour,
            close_hour=shop.close_hour,
            weekly_holidays=shop.weekly_holidays,
            barber_selection_fee=shop.barber_selection_fee,
            google_maps_url=shop.google_maps_url,
            created_at=shop.created_at.isoformat() if shop.created_at else None,
        )


class BarbershopListResponse(BaseModel):
    items: List[BarbershopInfo]
    total: int


class UpdateBarbershopCommand(BaseModel):
    """
    Partial edit of a barbershop profile.

    Omitted (or null) fields are left unchanged. is_active goes through the
    same cascade as the status endpoint.
    """

    name: Optional[str] = None
    address: Optional[str] = None
    whatsapp_number: Optional[str] = None
    google_maps_url: Optional[str] = None
    image_url: Optional[str] = None
    open_hour: Optional[int] = Field(default=None, ge=0, le=23)
    close_hour: Optional[int] = Field(default=None, ge=0, le=23)
    barber_selection_fee: Optional[float] = Field(default=None, ge=0)
    services: Optional[List[str]] = None
    facilities: Optional[List[str]] = None
    weekly_holidays: Optional[List[int]] = None
    is_open: Optional[bool] = None
    is_active: Optional[bool] = None
    reason: str = ""


class UpdateBarbershopResponse(BaseModel):
    shop: BarbershopInfo
    tenants_updated: List[str] = []
