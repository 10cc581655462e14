"""Normalization of raw Voyager payloads into backend records.

Every function here is pure: it reads a raw JSON tree, never mutates it,
and returns a fully populated record. Absent or wrongly typed fields fall
back to "", 0, [] or {} (numbers are stringified where text is expected) so
downstream code never has to check for missing keys.
"""
import re
from typing import Any, Dict, List, Union

from .config import LINKEDIN_CDN_URL
from .models import (
    EducationInfo,
    MemberInfo,
    NormalizedCompany,
    NormalizedProfile,
    PatentInfo,
    PositionCompany,
    PositionInfo,
    ProjectInfo,
    PublicationInfo,
    School,
    WebsiteInfo,
)
from .utils import extract_root_domain

_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")

DEFAULT_WEBSITE_TYPE = "Portfolio"


def _mapping(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _sequence(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _text(value: Any) -> str:
    """Strings pass through, numbers are stringified, anything else is ""."""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def _int(value: Any, default: Union[int, str] = 0) -> Union[int, str]:
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    return default


def _strings(value: Any) -> List[str]:
    return [item for item in _sequence(value) if isinstance(item, str)]


def _names(items: List[Any], key: str) -> List[str]:
    """Collect ``item[key]`` from each mapping, skipping non-string names."""
    return _strings([_mapping(item).get(key) for item in items])


def _elements(raw: Dict[str, Any], view: str) -> List[Dict[str, Any]]:
    """Return ``raw[view]["elements"]`` keeping only mapping entries."""
    elements = _sequence(_mapping(raw.get(view)).get("elements"))
    return [e for e in elements if isinstance(e, dict)]


def scrub_id_from_urn(urn: Any) -> Union[int, str]:
    """Extract the numeric id from an urn such as ``urn:li:company:12345``.

    Returns ``""`` when the urn is absent or its last segment is not numeric.
    """
    if not urn or not isinstance(urn, str):
        return ""

    match = _LEADING_INT_RE.match(urn.split(":")[-1])
    if not match:
        return ""
    return int(match.group(1))


def scrub_path_to_resource(resource: Any) -> str:
    """Build a CDN URL from an image-variant mapping.

    The first variant wins, e.g. ``{"original": {"id": "/abc"}}`` becomes
    ``<cdn>/abc``. Malformed input yields ``""``.
    """
    if not isinstance(resource, dict) or not resource:
        return ""

    variant = next(iter(resource.values()))
    path = _mapping(variant).get("id") or ""
    if not isinstance(path, str) or not path:
        return ""
    return f"{LINKEDIN_CDN_URL}{path}"


def scrub_member_info(member: Any) -> MemberInfo:
    """Scrub a member wrapper (``{"member": {...}}``) into a ``MemberInfo``."""
    info = _mapping(_mapping(member).get("member"))
    picture = None
    if "picture" in info:
        picture = scrub_path_to_resource(info["picture"])

    return MemberInfo(
        firstname=_text(info.get("firstName")),
        lastname=_text(info.get("lastName")),
        occupation=_text(info.get("occupation")),
        public_identifier=_text(info.get("publicIdentifier")),
        picture=picture,
    )


def scrub_patent_info(patent: Dict[str, Any]) -> PatentInfo:
    inventors = None
    raw_inventors = _sequence(patent.get("inventors"))
    if raw_inventors:
        inventors = [
            scrub_member_info(inventor)
            for inventor in raw_inventors
            if isinstance(inventor, dict) and "member" in inventor
        ]

    return PatentInfo(
        application_number=_text(patent.get("applicationNumber")),
        description=_text(patent.get("description")),
        filing_date=_mapping(patent.get("filingDate")),
        issue_date=_mapping(patent.get("issueDate")),
        number=_text(patent.get("number")),
        pending=bool(patent.get("pending")),
        title=_text(patent.get("title")),
        url=_text(patent.get("url")),
        inventors=inventors,
    )


def scrub_publication_info(publication: Dict[str, Any]) -> PublicationInfo:
    authors = None
    raw_authors = _sequence(publication.get("authors"))
    if raw_authors:
        authors = [scrub_member_info(author) for author in raw_authors]

    return PublicationInfo(
        date=_mapping(publication.get("date")),
        description=_text(publication.get("description")),
        name=_text(publication.get("name")),
        publisher=_text(publication.get("publisher")),
        url=_text(publication.get("url")),
        authors=authors,
    )


def scrub_project_info(project: Dict[str, Any]) -> ProjectInfo:
    """Scrub a project; scrubbed members stay under the ``members`` key."""
    members = None
    raw_members = _sequence(project.get("members"))
    if raw_members:
        members = [scrub_member_info(member) for member in raw_members]

    return ProjectInfo(
        description=_text(project.get("description")),
        time_period=_mapping(project.get("timePeriod")),
        title=_text(project.get("title")),
        url=_text(project.get("url")),
        members=members,
    )


def scrub_position_info(position: Dict[str, Any]) -> PositionInfo:
    company = None
    if isinstance(position.get("company"), dict):
        raw_company = position["company"]
        logo = None
        mini_company = _mapping(raw_company.get("miniCompany"))
        if "logo" in mini_company:
            logo = scrub_path_to_resource(mini_company["logo"])
        company = PositionCompany(
            employee_count_range=_mapping(raw_company.get("employeeCountRange")),
            industries=_sequence(raw_company.get("industries")),
            logo=logo,
        )

    return PositionInfo(
        location_name=_text(position.get("locationName")),
        company_name=_text(position.get("companyName")),
        linked_in_company_id=scrub_id_from_urn(position.get("companyUrn")),
        description=_text(position.get("description")),
        time_period=_mapping(position.get("timePeriod")),
        title=_text(position.get("title")),
        company=company,
    )


def scrub_education_info(education: Dict[str, Any]) -> EducationInfo:
    school = None
    if isinstance(education.get("school"), dict):
        raw_school = education["school"]
        logo = None
        if "logo" in raw_school:
            logo = scrub_path_to_resource(raw_school["logo"])
        school = School(
            active=bool(raw_school.get("active")),
            name=_text(raw_school.get("schoolName")),
            logo=logo,
        )

    return EducationInfo(
        activities=_text(education.get("activities")),
        degree_name=_text(education.get("degreeName")),
        field_of_study=_text(education.get("fieldOfStudy")),
        time_period=_mapping(education.get("timePeriod")),
        school_name=_text(education.get("schoolName")),
        school=school,
    )


def scrub_website_info(website: Dict[str, Any]) -> WebsiteInfo:
    """The category lives under the first key of the ``type`` union mapping."""
    type_union = _mapping(website.get("type"))
    category = ""
    if type_union:
        category = _text(_mapping(next(iter(type_union.values()))).get("category"))

    return WebsiteInfo(
        website=_text(website.get("url")),
        type=category or DEFAULT_WEBSITE_TYPE,
    )


def _current_position_title(positions: List[Dict[str, Any]]) -> str:
    for position in positions:
        period = position.get("timePeriod")
        if isinstance(period, dict) and "startDate" in period and "endDate" not in period:
            return _text(position.get("title"))
    return ""


def scrub_full_profile(raw: Dict[str, Any]) -> NormalizedProfile:
    """Scrub the merged profileView + contact info + highlights payload."""
    profile = _mapping(raw.get("profile"))
    mini_profile = _mapping(profile.get("miniProfile"))

    headline = _text(profile.get("headline"))
    occupation = _text(mini_profile.get("occupation"))
    raw_positions = _elements(raw, "positionView")

    # LinkedIn sometimes returns the headline as the occupation too. The
    # occupation should be the current title, so derive it from the open
    # position instead.
    if headline == occupation:
        occupation = _current_position_title(raw_positions)

    picture = ""
    picture_info = _mapping(profile.get("pictureInfo"))
    master_image = picture_info.get("masterImage")
    if master_image and isinstance(master_image, str):
        picture = f"{LINKEDIN_CDN_URL}{master_image}"

    twitter_handles = _names(_sequence(raw.get("twitterHandles")), "name")
    websites = [
        scrub_website_info(w) for w in _sequence(raw.get("websites")) if isinstance(w, dict)
    ]

    return NormalizedProfile(
        firstname=_text(profile.get("firstName")),
        lastname=_text(profile.get("lastName")),
        headline=headline,
        industry_name=_text(profile.get("industryName")),
        summary=_text(profile.get("summary")),
        location=_text(profile.get("locationName")),
        email_address=_text(raw.get("emailAddress")),
        public_identifier=_text(raw.get("publicIdentifier")),
        occupation=occupation,
        address=_text(profile.get("address")),
        birthdate=_mapping(raw.get("birthDateOn")),
        phone_numbers=_sequence(raw.get("phoneNumbers")),
        twitter_handles=twitter_handles,
        picture=picture,
        education=[scrub_education_info(e) for e in _elements(raw, "educationView")],
        patents=[scrub_patent_info(p) for p in _elements(raw, "patentView")],
        publications=[scrub_publication_info(p) for p in _elements(raw, "publicationView")],
        projects=[scrub_project_info(p) for p in _elements(raw, "projectView")],
        positions=[scrub_position_info(p) for p in raw_positions],
        languages=_names(_elements(raw, "languageView"), "name"),
        skills=_names(_elements(raw, "skillView"), "name"),
        websites=websites,
    )


def scrub_company(company: Dict[str, Any]) -> NormalizedCompany:
    """Scrub one element of the organization/companies lookup."""
    headquarter = _mapping(company.get("headquarter"))
    page_url = _text(company.get("companyPageUrl"))

    logo = ""
    if "image" in _mapping(company.get("logo")):
        logo = scrub_path_to_resource(company["logo"]["image"])

    cover_image = ""
    if "image" in _mapping(company.get("backgroundCoverImage")):
        cover_image = scrub_path_to_resource(company["backgroundCoverImage"]["image"])

    return NormalizedCompany(
        affiliated_companies=_sequence(company.get("affiliatedCompanies")),
        page_url=page_url,
        domain=extract_root_domain(page_url),
        type=_text(_mapping(company.get("companyType")).get("localizedName")),
        confirmed_locations=_sequence(company.get("confirmedLocations")),
        description=_text(company.get("description")),
        linked_in_urn=_text(company.get("entityUrn")),
        name=_text(company.get("name")),
        specialities=_strings(company.get("specialities")),
        universal_name=_text(company.get("universalName")),
        linked_in_page_url=_text(company.get("url")),
        parent_company_linked_in_id=scrub_id_from_urn(company.get("parentCompany")),
        linked_in_id=scrub_id_from_urn(company.get("entityUrn")),
        founded_on=_int(_mapping(company.get("foundedOn")).get("year"), default=""),
        industries=_names(_sequence(company.get("companyIndustries")), "localizedName"),
        city=_text(headquarter.get("city")),
        country=_text(headquarter.get("country")),
        geographic_area=_text(headquarter.get("geographicArea")),
        addr1=_text(headquarter.get("line1")),
        addr2=_text(headquarter.get("line2")),
        postal_code=_text(headquarter.get("postalCode")),
        linked_in_follower_count=_int(_mapping(company.get("followingInfo")).get("followerCount")),
        staff_count=_int(company.get("staffCount")),
        logo=logo,
        background_cover_image=cover_image,
        background_cover_photo=scrub_path_to_resource(company.get("backgroundCoverPhoto")),
    )
