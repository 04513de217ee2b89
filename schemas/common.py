from enum import Enum
from math import ceil
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ApiStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    RATE_LIMITED = "rate_limited"


class BaseResponse(BaseModel):
    """Envelope shared by every API response"""
    status: ApiStatus = ApiStatus.SUCCESS
    message: str = ""

    model_config = ConfigDict(use_enum_values=True)


class OrmModel(BaseModel):
    """Schema that can be built straight from a peewee row"""
    model_config = ConfigDict(from_attributes=True)


class Pagination(BaseModel):
    page: int = Field(..., description="Current page (1-based)")
    limit: int = Field(..., description="Page size after clamping")
    total: int = Field(..., description="Rows matching the filters")
    total_pages: int = Field(..., description="ceil(total / limit)")

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "Pagination":
        return cls(page=page, limit=limit, total=total, total_pages=ceil(total / limit) if limit else 0)


def clamp_page(page: Optional[int]) -> int:
    return max(1, page or 1)


def clamp_limit(limit: Optional[int], default: int, maximum: int) -> int:
    if not limit or limit < 1:
        return default
    return min(limit, maximum)


# --------------------------- Shared summaries ---------------------------- #

class TeamSummary(OrmModel):
    id: int
    tid: int
    title: Optional[str] = None
    abbr: Optional[str] = None
    alt_name: Optional[str] = None
    type: Optional[str] = None
    thumb_url: Optional[str] = None
    logo_url: Optional[str] = None
    country: Optional[str] = None
    sex: Optional[str] = None


class PlayerSummary(OrmModel):
    id: int
    pid: int
    title: Optional[str] = None
    short_name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    birthdate: Optional[str] = None
    birthplace: Optional[str] = None
    country: Optional[str] = None
    playing_role: Optional[str] = None
    batting_style: Optional[str] = None
    bowling_style: Optional[str] = None
    fantasy_rating: Optional[float] = None
    nationality: Optional[str] = None
    twitter_profile: Optional[str] = None
    instagram_profile: Optional[str] = None


class VenueSummary(OrmModel):
    id: int
    venue_id: str
    name: Optional[str] = None
    location: Optional[str] = None
    country: Optional[str] = None
    timezone: Optional[str] = None


class CompetitionSummary(OrmModel):
    id: int
    cid: int
    title: Optional[str] = None
    abbr: Optional[str] = None
    season: Optional[str] = None
    total_matches: Optional[int] = None
    total_teams: Optional[int] = None
