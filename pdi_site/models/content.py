from pydantic import BaseModel, Field, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from typing import List, Optional, Literal

class ContentModel(BaseModel):
    # Sanity documents are camelCase and carry _type/_key/_rev noise we don't use
    model_config = ConfigDict(
        extra='ignore',
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

class Reference(ContentModel):
    id: str = Field(..., alias="_id")
    name: Optional[str] = None

class InternalRole(ContentModel):
    organization: Reference
    title: Optional[str] = None

class PersonRecord(ContentModel):
    affiliation_type: Literal["internal", "external"] = "external"
    internal_roles: List[InternalRole] = Field(default_factory=list)
    faculty_title: Optional[str] = None
    institution: Optional[str] = None
    categories: List[Optional[Reference]] = Field(default_factory=list)
    department: Optional[str] = None

# --- images ---

class AssetRef(ContentModel):
    ref: str = Field(..., alias="_ref")

class ImageHotspot(ContentModel):
    x: float
    y: float
    width: float = 1.0
    height: float = 1.0

class ImageCrop(ContentModel):
    top: float = 0.0
    bottom: float = 0.0
    left: float = 0.0
    right: float = 0.0

class SanityImage(ContentModel):
    asset: AssetRef
    hotspot: Optional[ImageHotspot] = None
    crop: Optional[ImageCrop] = None

# --- portable text ---

class Span(ContentModel):
    text: str = ""

class Block(ContentModel):
    children: List[Span] = Field(default_factory=list)

# --- events ---

class PlaceLocation(ContentModel):
    street_address: Optional[str] = None
    extended_address: Optional[str] = None
    address_locality: Optional[str] = None
    address_region: Optional[str] = None
    postal_code: Optional[str] = None
    address_country: Optional[str] = None

class Place(ContentModel):
    name: str
    location: PlaceLocation = Field(default_factory=PlaceLocation)

class EventDetails(ContentModel):
    start_date: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$")
    end_date: Optional[str] = Field(default=None, pattern=r"^\d{4}-\d{2}-\d{2}$")
    start_time: Optional[str] = Field(default=None, pattern=r"^\d{2}:\d{2}$")  # HH:MM, local
    end_time: Optional[str] = Field(default=None, pattern=r"^\d{2}:\d{2}$")
    multi_day: bool = False

    @field_validator("end_date", "start_time", "end_time", mode="before")
    @classmethod
    def _blank_as_absent(cls, v):
        # a cleared date/time field in the studio comes through as ""
        return v or None

class EventRecord(ContentModel):
    title: str
    image: Optional[SanityImage] = None
    place: List[Place] = Field(default_factory=list)
    details: EventDetails
    preview: Optional[List[Block]] = None

# --- site settings (singleton document) ---

class SeoSettings(ContentModel):
    title: Optional[str] = None
    description: Optional[str] = None

class SiteSettings(ContentModel):
    site_domain: Optional[str] = None
    site_name: Optional[str] = None
    seo: SeoSettings = Field(default_factory=SeoSettings)
