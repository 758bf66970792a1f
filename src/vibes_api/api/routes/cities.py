from __future__ import annotations

from vibes_api.api.generic import (
    FilterField,
    ResourceDescriptor,
    StatusFilter,
    create_crud_router,
)
from vibes_api.models import City
from vibes_api.schemas.city import CityCreate, CityResponse, CityUpdate

CITIES = ResourceDescriptor(
    name="City",
    label="City",
    plural_label="Cities",
    prefix="/cities",
    model=City,
    id_field="city_id",
    response_schema=CityResponse,
    create_schema=CityCreate,
    update_schema=CityUpdate,
    search_columns=("name",),
    filter_fields=(FilterField("country_id"), FilterField("state_id")),
    status_filter=StatusFilter.PRESENCE,
    anonymous_create=True,
    default_creator=1,
    tags=("cities",),
)

router = create_crud_router(CITIES)
