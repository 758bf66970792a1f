"""Admin-managed lookup tables."""

from __future__ import annotations

from fastapi import APIRouter

from vibes_api.api.generic import (
    ResourceDescriptor,
    RoutePaths,
    StatusFilter,
    create_crud_router,
)
from vibes_api.models import BankName, EventAmenity, PaymentMethod
from vibes_api.schemas.lookups import (
    BankNameCreate,
    BankNameResponse,
    BankNameUpdate,
    EventAmenityCreate,
    EventAmenityResponse,
    EventAmenityUpdate,
    PaymentMethodCreate,
    PaymentMethodResponse,
    PaymentMethodUpdate,
)

EVENT_AMENITIES = ResourceDescriptor(
    name="EventAmenity",
    label="Event amenity",
    plural_label="Event amenities",
    prefix="/admin/event-amenities",
    model=EventAmenity,
    id_field="event_amenities_id",
    response_schema=EventAmenityResponse,
    create_schema=EventAmenityCreate,
    update_schema=EventAmenityUpdate,
    search_columns=("name",),
    status_filter=StatusFilter.PRESENCE,
    paths=RoutePaths(update="/updateById", delete="/deleteById/{item_id}"),
    tags=("admin",),
)

PAYMENT_METHODS = ResourceDescriptor(
    name="PaymentMethod",
    label="Payment method",
    plural_label="Payment methods",
    prefix="/admin/payment-methods",
    model=PaymentMethod,
    id_field="payment_methods_id",
    response_schema=PaymentMethodResponse,
    create_schema=PaymentMethodCreate,
    update_schema=PaymentMethodUpdate,
    search_columns=("payment_method",),
    status_filter=StatusFilter.PRESENCE,
    tags=("admin",),
)

BANK_NAMES = ResourceDescriptor(
    name="BankName",
    label="Bank name",
    plural_label="Bank names",
    prefix="/admin/bank-names",
    model=BankName,
    id_field="bank_name_id",
    response_schema=BankNameResponse,
    create_schema=BankNameCreate,
    update_schema=BankNameUpdate,
    search_columns=("bank_name",),
    status_filter=StatusFilter.PRESENCE,
    tags=("admin",),
)

router = APIRouter()
for _resource in (EVENT_AMENITIES, PAYMENT_METHODS, BANK_NAMES):
    router.include_router(create_crud_router(_resource))
