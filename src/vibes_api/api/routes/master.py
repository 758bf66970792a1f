"""Master data: catalogue entries, event building blocks and support tickets."""

from __future__ import annotations

from fastapi import APIRouter

from vibes_api.api.generic import (
    FilterField,
    PaginationStyle,
    ResourceDescriptor,
    RoutePaths,
    StatusFilter,
    create_crud_router,
)
from vibes_api.models import (
    Category,
    Decorations,
    DressCode,
    Drinks,
    Entertainment,
    EventEntryTicket,
    EventSetupRequirement,
    EventTheme,
    Food,
    Item,
    ItemCategory,
    Ticket,
    TicketType,
)
from vibes_api.schemas import catalog, category, event, item, lookups

CATEGORIES = ResourceDescriptor(
    name="Category",
    label="Category",
    plural_label="Categories",
    prefix="/master/category",
    model=Category,
    id_field="category_id",
    response_schema=category.CategoryResponse,
    create_schema=category.CategoryCreate,
    update_schema=category.CategoryUpdate,
    search_columns=("category_name",),
    status_filter=StatusFilter.PRESENCE,
    anonymous_create=True,
    default_creator=1,
    paths=RoutePaths(owned="/getByAuth"),
    tags=("master",),
)

TICKET_TYPES = ResourceDescriptor(
    name="TicketType",
    label="Ticket type",
    plural_label="Ticket types",
    prefix="/master/ticket-types",
    model=TicketType,
    id_field="ticket_type_id",
    response_schema=lookups.TicketTypeResponse,
    create_schema=lookups.TicketTypeCreate,
    update_schema=lookups.TicketTypeUpdate,
    search_columns=("ticket_type",),
    status_filter=StatusFilter.PRESENCE,
    tags=("master",),
)

TICKETS = ResourceDescriptor(
    name="Ticket",
    label="Ticket",
    plural_label="Tickets",
    prefix="/master/tickets",
    model=Ticket,
    id_field="ticket_id",
    response_schema=event.TicketResponse,
    create_schema=event.TicketCreate,
    update_schema=event.TicketUpdate,
    search_columns=("ticket_query", "reply"),
    filter_fields=(FilterField("event_id"), FilterField("ticket_type_id")),
    status_filter=StatusFilter.IGNORED,
    paths=RoutePaths(
        get="/getTicketById/{item_id}",
        update="/updateTicketById",
        delete="/deleteTicketById/{item_id}",
        owned="/getTicketByAuth",
    ),
    tags=("master",),
)

EVENT_THEMES = ResourceDescriptor(
    name="EventTheme",
    label="Event theme",
    plural_label="Event themes",
    prefix="/master/event-theme",
    model=EventTheme,
    id_field="event_theme_id",
    response_schema=lookups.EventThemeResponse,
    create_schema=lookups.EventThemeCreate,
    update_schema=lookups.EventThemeUpdate,
    search_columns=("event_theme_name",),
    status_filter=StatusFilter.PRESENCE,
    tags=("master",),
)

DRESS_CODES = ResourceDescriptor(
    name="DressCode",
    label="Dress code",
    plural_label="Dress codes",
    prefix="/master/dress-code",
    model=DressCode,
    id_field="dress_code_id",
    response_schema=lookups.DressCodeResponse,
    create_schema=lookups.DressCodeCreate,
    update_schema=lookups.DressCodeUpdate,
    search_columns=("dress_code_name",),
    status_filter=StatusFilter.PRESENCE,
    tags=("master",),
)

FOOD = ResourceDescriptor(
    name="Food",
    label="Food",
    plural_label="Food",
    prefix="/master/food",
    model=Food,
    id_field="food_id",
    response_schema=catalog.FoodResponse,
    create_schema=catalog.FoodCreate,
    update_schema=catalog.FoodUpdate,
    search_columns=("food_name", "food_type", "brand_name"),
    status_filter=StatusFilter.PRESENCE,
    tags=("master",),
)

DRINKS = ResourceDescriptor(
    name="Drinks",
    label="Drinks",
    plural_label="Drinks",
    prefix="/master/drinks",
    model=Drinks,
    id_field="drinks_id",
    response_schema=catalog.DrinksResponse,
    create_schema=catalog.DrinksCreate,
    update_schema=catalog.DrinksUpdate,
    search_columns=("drinks_name", "brand_name"),
    status_filter=StatusFilter.PRESENCE,
    tags=("master",),
)

DECORATIONS = ResourceDescriptor(
    name="Decorations",
    label="Decorations",
    plural_label="Decorations",
    prefix="/master/decorations",
    model=Decorations,
    id_field="decorations_id",
    response_schema=catalog.DecorationsResponse,
    create_schema=catalog.DecorationsCreate,
    update_schema=catalog.DecorationsUpdate,
    search_columns=("decorations_name", "decorations_type", "brand_name"),
    status_filter=StatusFilter.PRESENCE,
    tags=("master",),
)

ENTERTAINMENT = ResourceDescriptor(
    name="Entertainment",
    label="Entertainment",
    plural_label="Entertainment",
    prefix="/master/entertainment",
    model=Entertainment,
    id_field="entertainment_id",
    response_schema=catalog.EntertainmentResponse,
    create_schema=catalog.EntertainmentCreate,
    update_schema=catalog.EntertainmentUpdate,
    search_columns=("entertainment_name", "entertainment_type", "brand_name"),
    status_filter=StatusFilter.PRESENCE,
    tags=("master",),
)

# The item and event resources serve the classic pagination keys and
# remove records outright.

ITEM_CATEGORIES = ResourceDescriptor(
    name="ItemCategory",
    label="Item category",
    plural_label="Item categories",
    prefix="/master/item-category",
    model=ItemCategory,
    id_field="item_category_id",
    response_schema=item.ItemCategoryResponse,
    create_schema=item.ItemCategoryCreate,
    update_schema=item.ItemCategoryUpdate,
    search_columns=("categorytxt",),
    soft_delete=False,
    pagination_style=PaginationStyle.CLASSIC,
    paths=RoutePaths(list="/all", get="/get/{item_id}", owned="/my-categories"),
    tags=("master",),
)

ITEMS = ResourceDescriptor(
    name="Item",
    label="Item",
    plural_label="Items",
    prefix="/master/items",
    model=Item,
    id_field="items_id",
    response_schema=item.ItemResponse,
    create_schema=item.ItemCreate,
    update_schema=item.ItemUpdate,
    search_columns=("item_name", "item_brand", "item_color"),
    filter_fields=(FilterField("item_category_id", param_name="item_Category_id"),),
    soft_delete=False,
    pagination_style=PaginationStyle.CLASSIC,
    paths=RoutePaths(list="/all", get="/get/{item_id}", owned="/my-items"),
    tags=("master",),
)

EVENT_ENTRY_TICKETS = ResourceDescriptor(
    name="EventEntryTicket",
    label="Event entry ticket",
    plural_label="Event entry tickets",
    prefix="/master/event-entry-tickets",
    model=EventEntryTicket,
    id_field="event_entry_tickets_id",
    response_schema=event.EventEntryTicketResponse,
    create_schema=event.EventEntryTicketCreate,
    update_schema=event.EventEntryTicketUpdate,
    search_columns=("title", "tag"),
    filter_fields=(FilterField("event_id"),),
    status_filter=StatusFilter.IGNORED,
    soft_delete=False,
    pagination_style=PaginationStyle.CLASSIC,
    paths=RoutePaths(owned="/getByAuth"),
    tags=("master",),
)

EVENT_SETUP_REQUIREMENTS = ResourceDescriptor(
    name="EventSetupRequirement",
    label="Event setup requirement",
    plural_label="Event setup requirements",
    prefix="/master/event-setup-requirements",
    model=EventSetupRequirement,
    id_field="setup_requirements_id",
    response_schema=event.EventSetupRequirementResponse,
    create_schema=event.EventSetupRequirementCreate,
    update_schema=event.EventSetupRequirementUpdate,
    search_columns=("name",),
    soft_delete=False,
    pagination_style=PaginationStyle.CLASSIC,
    paths=RoutePaths(owned="/getByAuth"),
    tags=("master",),
)

RESOURCES = (
    CATEGORIES,
    TICKET_TYPES,
    TICKETS,
    EVENT_THEMES,
    DRESS_CODES,
    FOOD,
    DRINKS,
    DECORATIONS,
    ENTERTAINMENT,
    ITEM_CATEGORIES,
    ITEMS,
    EVENT_ENTRY_TICKETS,
    EVENT_SETUP_REQUIREMENTS,
)

router = APIRouter()
for _resource in RESOURCES:
    router.include_router(create_crud_router(_resource))
