from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Record(BaseModel):
    """Base for normalized records.

    Attributes are snake_case in Python and serialize to the camelCase keys
    the backend stores. Records are frozen once built.
    """
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        coerce_numbers_to_str=True,
    )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with backend keys, dropping optional sub-records that were absent."""
        return self.model_dump(by_alias=True, exclude_none=True)


class MemberInfo(Record):
    """Minimal person reference embedded in patents, publications and projects."""
    firstname: str = ""
    lastname: str = ""
    occupation: str = ""
    public_identifier: str = ""
    picture: Optional[str] = None


class School(Record):
    active: bool = False
    name: str = ""
    logo: Optional[str] = None


class EducationInfo(Record):
    activities: str = ""
    degree_name: str = ""
    field_of_study: str = ""
    time_period: Dict[str, Any] = {}
    school_name: str = ""
    school: Optional[School] = None


class PositionCompany(Record):
    employee_count_range: Dict[str, Any] = {}
    industries: List[Any] = []
    logo: Optional[str] = None


class PositionInfo(Record):
    location_name: str = ""
    company_name: str = ""
    linked_in_company_id: Union[int, str] = ""
    description: str = ""
    time_period: Dict[str, Any] = {}
    title: str = ""
    company: Optional[PositionCompany] = None


class PatentInfo(Record):
    application_number: str = ""
    description: str = ""
    filing_date: Dict[str, Any] = {}
    issue_date: Dict[str, Any] = {}
    number: str = ""
    pending: bool = False
    title: str = ""
    url: str = ""
    inventors: Optional[List[MemberInfo]] = None


class PublicationInfo(Record):
    date: Dict[str, Any] = {}
    description: str = ""
    name: str = ""
    publisher: str = ""
    url: str = ""
    authors: Optional[List[MemberInfo]] = None


class ProjectInfo(Record):
    description: str = ""
    time_period: Dict[str, Any] = {}
    title: str = ""
    url: str = ""
    members: Optional[List[MemberInfo]] = None


class WebsiteInfo(Record):
    website: str = ""
    type: str = "Portfolio"


class NormalizedProfile(Record):
    """Flattened profile assembled from profileView, contact info and highlights."""
    source: str = "LinkedIn"
    firstname: str = ""
    lastname: str = ""
    headline: str = ""
    industry_name: str = ""
    summary: str = ""
    location: str = ""
    email_address: str = ""
    public_identifier: str = ""
    occupation: str = ""
    address: str = ""
    birthdate: Dict[str, Any] = {}
    phone_numbers: List[Any] = []
    twitter_handles: List[str] = []
    picture: str = ""
    education: List[EducationInfo] = []
    patents: List[PatentInfo] = []
    publications: List[PublicationInfo] = []
    projects: List[ProjectInfo] = []
    positions: List[PositionInfo] = []
    languages: List[str] = []
    skills: List[str] = []
    websites: List[WebsiteInfo] = []


class NormalizedCompany(Record):
    """Company record from the organization/companies lookup."""
    source: str = "LinkedIn"
    affiliated_companies: List[Any] = []
    page_url: str = ""
    domain: str = ""
    type: str = ""
    confirmed_locations: List[Any] = []
    description: str = ""
    linked_in_urn: str = ""
    name: str = ""
    specialities: List[str] = []
    universal_name: str = ""
    linked_in_page_url: str = ""
    parent_company_linked_in_id: Union[int, str] = ""
    linked_in_id: Union[int, str] = ""
    founded_on: Union[int, str] = ""
    industries: List[str] = []
    city: str = ""
    country: str = ""
    geographic_area: str = ""
    addr1: str = ""
    addr2: str = ""
    postal_code: str = ""
    linked_in_follower_count: int = 0
    staff_count: int = 0
    logo: str = ""
    background_cover_image: str = ""
    background_cover_photo: str = ""


class ProfileRequest(BaseModel):
    """Incoming payload for the profile endpoint.

    Either a public identifier or a profile URL (``/in/`` or ``/pub/``) is
    accepted; the identifier wins when both are given.
    """
    url: Optional[str] = None
    public_identifier: Optional[str] = None


class CompanyRequest(BaseModel):
    universal_name: str


class SalesNavRequest(BaseModel):
    url: str
