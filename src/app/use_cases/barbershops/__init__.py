"""Barbershop management use cases."""

from .list_barbershops_use_case import ListBarbershopsUseCase
from .get_barbershop_use_case import GetBarbershopUseCase
from .update_barbershop_use_case import UpdateBarbershopUseCase
from .toggle_barbershop_status_use_case import ToggleBarbershopStatusUseCase
from .delete_barbershop_use_case import DeleteBarbershopUseCase
from .dtos import (
    BarbershopInfo,
    BarbershopListResponse,
    BarbershopStatusCommand,
    BarbershopStatusResponse,
    DeleteBarbershopResponse,
    UpdateBarbershopCommand,
    UpdateBarbershopResponse,
)

__all__ = [
    "ListBarbershopsUseCase",
    "GetBarbershopUseCase",
    "UpdateBarbershopUseCase",
    "ToggleBarbershopStatusUseCase",
    "DeleteBarbershopUseCase",
    "BarbershopInfo",
    "BarbershopListResponse",
    "BarbershopStatusCommand",
    "BarbershopStatusResponse",
    "DeleteBarbershopResponse",
    "UpdateBarbershopCommand",
    "UpdateBarbershopResponse",
]
