# backend/scraper/models.py
"""Player record models returned by the squad scraper."""

from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_serializer
from pydantic.alias_generators import to_camel

from backend.scraper.config import NOT_AVAILABLE


def _or_not_available(value: Optional[str]) -> str:
    """Render absent or empty text as the N/A sentinel."""
    return value if value else NOT_AVAILABLE


# None = not in markup, "" = present but empty; both render as "N/A"
OptionalText = Annotated[
    Optional[str], PlainSerializer(_or_not_available, return_type=str)
]


class MarketValue(BaseModel):
    """Market value amount with its currency symbol."""

    value: float = Field(default=0.0, ge=0)
    currency: OptionalText = None

    @field_serializer("value")
    def serialize_value(self, value: float) -> int | float:
        return int(value) if float(value).is_integer() else value


class LastClub(BaseModel):
    """Club the player was signed from."""

    signed_from_club_name: OptionalText = None
    signed_from_club_id: OptionalText = None
    signed_from_club_image_url: OptionalText = None


class AdditionalInfo(BaseModel):
    """Loan or transfer annotation attached to a player."""

    content: OptionalText = None
    info_club_name: OptionalText = None
    info_club_id: OptionalText = None
    info_club_image_url: OptionalText = None


class Player(BaseModel):
    """One row of a club's squad table."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: OptionalText = None
    id: OptionalText = None
    position: OptionalText = None
    shirt_number: OptionalText = None
    image: OptionalText = None
    date_of_birth: str
    age: str
    nationality: list[str] = Field(default_factory=lambda: [NOT_AVAILABLE], min_length=1)
    height: OptionalText = None
    foot: OptionalText = None
    injury: bool = False
    captain: bool = False
    suspension: bool = False
    joined: OptionalText = None
    contract_until: OptionalText = None
    market_value: MarketValue = Field(default_factory=MarketValue)
    last_club: Optional[LastClub] = None
    additional_information: Optional[AdditionalInfo] = None

    def to_json_dict(self) -> dict:
        """Serialize with the public camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)
