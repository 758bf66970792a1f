"""ORM models; importing this package registers every table on Base.metadata."""

from __future__ import annotations

from vibes_api.models.catalog import Decorations, Drinks, Entertainment, Food
from vibes_api.models.category import Category
from vibes_api.models.city import City
from vibes_api.models.community import CommunityDesign, CommunityDesignLike
from vibes_api.models.event import EventEntryTicket, EventSetupRequirement, Ticket
from vibes_api.models.global_search import GlobalSearchEntry
from vibes_api.models.item import Item, ItemCategory
from vibes_api.models.lookups import (
    BankName,
    DressCode,
    EventAmenity,
    EventTheme,
    PaymentMethod,
    TicketType,
)
from vibes_api.models.review import ClientReview

__all__ = [
    "BankName",
    "Category",
    "City",
    "ClientReview",
    "CommunityDesign",
    "CommunityDesignLike",
    "Decorations",
    "DressCode",
    "Drinks",
    "Entertainment",
    "EventAmenity",
    "EventEntryTicket",
    "EventSetupRequirement",
    "EventTheme",
    "Food",
    "GlobalSearchEntry",
    "Item",
    "ItemCategory",
    "PaymentMethod",
    "Ticket",
    "TicketType",
]
