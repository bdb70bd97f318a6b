"""Listing template and generated listing routes."""

from dealflip.models import GeneratedListing, ListingTemplate
from dealflip.routes.crud import crud_router
from dealflip.schemas.listing import (
    GeneratedListingCreate,
    GeneratedListingRead,
    GeneratedListingUpdate,
    ListingTemplateCreate,
    ListingTemplateRead,
    ListingTemplateUpdate,
)

templates_router = crud_router(
    path="/listing-templates",
    model=ListingTemplate,
    create_schema=ListingTemplateCreate,
    update_schema=ListingTemplateUpdate,
    read_schema=ListingTemplateRead,
    label="Listing template",
    tag="listings",
)

generated_router = crud_router(
    path="/generated-listings",
    model=GeneratedListing,
    create_schema=GeneratedListingCreate,
    update_schema=GeneratedListingUpdate,
    read_schema=GeneratedListingRead,
    label="Generated listing",
    tag="listings",
)
