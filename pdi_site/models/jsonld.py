"""
schema.org shapes emitted as JSON-LD. Only the subset of the vocabulary the
site actually renders is modelled; serialize with `to_jsonld()`.
"""
from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Any, Dict, List, Optional, Union, Literal

SCHEMA_CONTEXT = "https://schema.org"

class JsonLdModel(BaseModel):
    model_config = ConfigDict(
        extra='forbid',
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_jsonld(self) -> Dict[str, Any]:
        # absent values are dropped, never emitted as null
        return self.model_dump(by_alias=True, exclude_none=True)

class PostalAddress(JsonLdModel):
    type: Literal["PostalAddress"] = Field("PostalAddress", alias="@type")
    extended_address: Optional[str] = None
    street_address: Optional[str] = None
    address_locality: Optional[str] = None
    address_region: Optional[str] = None
    postal_code: Optional[str] = None
    address_country: Optional[str] = None

class PlaceSchema(JsonLdModel):
    type: Literal["Place"] = Field("Place", alias="@type")
    name: str
    address: PostalAddress

class OrganizationRef(JsonLdModel):
    type: str = Field("Organization", alias="@type")
    name: str
    url: Optional[str] = None
    parent_organization: Optional["OrganizationRef"] = None

class EventSchema(JsonLdModel):
    context: Literal["https://schema.org"] = Field(SCHEMA_CONTEXT, alias="@context")
    type: Literal["Event"] = Field("Event", alias="@type")
    name: str
    start_date: str
    end_date: Optional[str] = None
    event_status: str = "https://schema.org/EventScheduled"
    location: PlaceSchema
    image: Optional[List[str]] = None
    description: Optional[str] = None
    organizer: OrganizationRef

class ContactPoint(JsonLdModel):
    type: Literal["ContactPoint"] = Field("ContactPoint", alias="@type")
    contact_type: str
    email: Optional[str] = None
    telephone: Optional[str] = None

class OpeningHoursSpecification(JsonLdModel):
    type: Literal["OpeningHoursSpecification"] = Field("OpeningHoursSpecification", alias="@type")
    day_of_week: List[str]
    opens: str  # HH:MM
    closes: str

class OrganizationSchema(JsonLdModel):
    context: Literal["https://schema.org"] = Field(SCHEMA_CONTEXT, alias="@context")
    type: Literal["EducationalOrganization"] = Field("EducationalOrganization", alias="@type")
    url: Optional[str] = None
    name: Optional[str] = None
    alternate_name: Optional[str] = None
    description: Optional[str] = None
    address: PostalAddress
    contact_point: ContactPoint
    email: Optional[str] = None
    knows_language: List[str] = Field(default_factory=list)
    opening_hours_specification: List[OpeningHoursSpecification] = Field(default_factory=list)
    parent_organization: OrganizationRef

StructuredData = Union[EventSchema, OrganizationSchema]

OrganizationRef.model_rebuild()
