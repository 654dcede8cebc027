"""Browse and search schemas."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from skillswap.schemas.profile import ProfileResponse

ALL_AVAILABILITY = "all"


class BrowseSort(str, Enum):
    """Sort orders offered on the browse page."""

    NEWEST = "newest"
    OLDEST = "oldest"
    NAME = "name"
    SKILLS = "skills"


class BrowseFilters(BaseModel):
    """Filters applied to the public profile snapshot.

    All predicates are ANDed; sorting is applied after filtering.
    """

    search: str = Field(default="", description="Matches name, offered or wanted skills")
    location: str = Field(default="", description="Substring of the profile location")
    availability: str = Field(default=ALL_AVAILABILITY, description="Exact availability or 'all'")
    sort: BrowseSort = Field(default=BrowseSort.NEWEST, description="Result ordering")


class BrowseResponse(BaseModel):
    """Filtered profiles with counts for "showing X of Y members"."""

    model_config = ConfigDict(from_attributes=True)

    profiles: list[ProfileResponse] = Field(default_factory=list, description="Matching profiles")
    count: int = Field(description="Number of matching profiles")
    total: int = Field(description="Number of public profiles before filtering")
