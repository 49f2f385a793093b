# pdi_site/services/jsonld.py
import logging
from typing import Any, Dict, List, Optional, Tuple

from pdi_site.models.content import Block, EventDetails, EventRecord, SiteSettings
from pdi_site.models.jsonld import (
    ContactPoint,
    EventSchema,
    OpeningHoursSpecification,
    OrganizationRef,
    OrganizationSchema,
    PlaceSchema,
    PostalAddress,
    StructuredData,
)
from pdi_site.services.image_url import url_for_image

logger = logging.getLogger(__name__)

StructuredDataObject = Dict[str, Any]

def to_structured_data(schema: StructuredData) -> StructuredDataObject:
    logger.debug("Serializing %s JSON-LD", schema.type)
    return schema.to_jsonld()

ORGANIZER = OrganizationRef(name="UCLA Pourdavoud Institute", url="https://pourdavoud.ucla.edu")

# (width, height) per aspect ratio, in the order search engines should see them
EVENT_IMAGE_SIZES = [
    (1200, 900),  # 4x3
    (1200, 675),  # 16x9
]

class MissingLocationError(ValueError):
    """Raised when an event has no place to build a schema.org location from."""

    def __init__(self, title: str):
        super().__init__(f"Event {title!r} has no place")
        self.title = title

# ----------------- events -----------------

def compose_event_dates(details: EventDetails) -> Tuple[str, Optional[str]]:
    start: str = details.start_date
    # no UTC offset: standard vs daylight time is left to the consumer
    if details.start_time:
        start = f"{details.start_date}T{details.start_time}:00"

    # single-day unless flagged: end shares the start date
    end: Optional[str]
    if details.end_time:
        end = f"{details.start_date}T{details.end_time}:00"
    else:
        end = details.start_date

    # multi-day events show calendar dates only
    if details.multi_day:
        start = details.start_date
        end = details.end_date

    return start, end

def preview_text(preview: Optional[List[Block]]) -> Optional[str]:
    if not preview:
        return None
    if not preview[0].children:
        return None
    return preview[0].children[0].text

def event_image_urls(event: EventRecord) -> Optional[List[str]]:
    if event.image is None:
        return None
    base = url_for_image(event.image).auto("format").fit("crop").crop("focalpoint")
    return [base.width(w).height(h).url() for w, h in EVENT_IMAGE_SIZES]

def build_event_schema(event: EventRecord) -> StructuredDataObject:
    if not event.place:
        raise MissingLocationError(event.title)
    place = event.place[0]
    loc = place.location

    start, end = compose_event_dates(event.details)
    schema = EventSchema(
        name=event.title,
        start_date=start,
        end_date=end,
        location=PlaceSchema(
            name=place.name,
            address=PostalAddress(
                extended_address=loc.extended_address or "",
                street_address=loc.street_address,
                address_locality=loc.address_locality,
                address_region=loc.address_region,
                postal_code=loc.postal_code,
                address_country=loc.address_country,
            ),
        ),
        image=event_image_urls(event),
        description=preview_text(event.preview),
        organizer=ORGANIZER,
    )
    logger.debug("Built Event JSON-LD for %r (%s -> %s)", event.title, start, end)
    return to_structured_data(schema)

# ----------------- organization -----------------

ORG_ADDRESS = PostalAddress(
    street_address="10745 Dickson Plaza, 381 Kaplan Hall",
    address_locality="Los Angeles",
    address_region="CA",
    postal_code="90095",
    address_country="US",
)
ORG_EMAIL = "pourdavoud@humnet.ucla.edu"

ORG_PARENT = OrganizationRef(
    type="CollegeOrUniversity",
    name="UCLA Division of Humanities",
    url="https://humanities.ucla.edu",
    parent_organization=OrganizationRef(
        type="CollegeOrUniversity",
        name="University of California, Los Angeles",
        url="https://www.ucla.edu",
    ),
)

WEEKDAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]

def build_organization_schema(settings: SiteSettings) -> StructuredDataObject:
    schema = OrganizationSchema(
        url=settings.site_domain,
        name=settings.site_name,
        alternate_name=settings.seo.title,
        description=settings.seo.description,
        address=ORG_ADDRESS,
        contact_point=ContactPoint(contact_type="general inquiries", email=ORG_EMAIL, telephone="+1-310-825-1093"),
        email=ORG_EMAIL,
        knows_language=["en", "fa"],
        opening_hours_specification=[
            OpeningHoursSpecification(day_of_week=WEEKDAYS, opens="09:00", closes="17:00"),
        ],
        parent_organization=ORG_PARENT,
    )
    return to_structured_data(schema)
