import copy

import pytest


class FakeResponse:
    """Stand-in for Playwright's APIResponse."""

    def __init__(self, status=200, payload=None, text="", url="https://www.linkedin.com/voyager/api/x"):
        self.status = status
        self.ok = 200 <= status < 300
        self.url = url
        self._payload = payload if payload is not None else {}
        self._text = text

    async def json(self):
        return self._payload

    async def text(self):
        return self._text


PROFILE_VIEW = {
    "profile": {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "headline": "Analyst at Engines Ltd",
        "industryName": "Computer Software",
        "summary": "First programmer.",
        "locationName": "London, United Kingdom",
        "address": "12 St James's Square",
        "miniProfile": {"occupation": "Analyst at Engines Ltd"},
        "pictureInfo": {"masterImage": "/p/3/000/ada.jpg"},
    },
    "educationView": {
        "elements": [
            {
                "schoolName": "University of London",
                "degreeName": "BSc",
                "fieldOfStudy": "Mathematics",
                "timePeriod": {"startDate": {"year": 1830}, "endDate": {"year": 1833}},
                "school": {
                    "active": True,
                    "schoolName": "University of London",
                    "logo": {"com.linkedin.voyager.common.MediaProcessorImage": {"id": "/p/uol.png"}},
                },
            },
        ]
    },
    "positionView": {
        "elements": [
            {
                "title": "Translator",
                "companyName": "Taylor's Scientific Memoirs",
                "companyUrn": "urn:li:fs_miniCompany:1001",
                "timePeriod": {"startDate": {"year": 1842}, "endDate": {"year": 1843}},
            },
            {
                "title": "Analyst",
                "companyName": "Engines Ltd",
                "companyUrn": "urn:li:fs_miniCompany:2002",
                "locationName": "London",
                "description": "Notes on the Analytical Engine.",
                "timePeriod": {"startDate": {"year": 1843}},
                "company": {
                    "employeeCountRange": {"start": 11, "end": 50},
                    "industries": ["Computer Software"],
                    "miniCompany": {"logo": {"original": {"id": "/p/engines.png"}}},
                },
            },
        ]
    },
    "patentView": {
        "elements": [
            {
                "title": "Bernoulli numbers method",
                "number": "GB-1843",
                "pending": True,
                "inventors": [
                    {"member": {"firstName": "Charles", "lastName": "Babbage", "publicIdentifier": "cbabbage"}},
                    {"profileUrn": "urn:li:fs_profile:external"},
                ],
            }
        ]
    },
    "publicationView": {
        "elements": [
            {
                "name": "Sketch of the Analytical Engine",
                "publisher": "Scientific Memoirs",
                "date": {"year": 1843},
                "authors": [{"member": {"firstName": "Ada", "lastName": "Lovelace"}}],
            }
        ]
    },
    "projectView": {
        "elements": [
            {
                "title": "Note G",
                "members": [
                    {
                        "member": {
                            "firstName": "Charles",
                            "lastName": "Babbage",
                            "occupation": "Inventor",
                            "publicIdentifier": "cbabbage",
                            "picture": {"original": {"id": "/p/cb.jpg"}},
                        }
                    }
                ],
            }
        ]
    },
    "languageView": {"elements": [{"name": "English"}, {"name": "French"}]},
    "skillView": {"elements": [{"name": "Mathematics"}, {"name": "Programming"}]},
}

CONTACT_INFO = {
    "emailAddress": "ada@example.com",
    "phoneNumbers": [{"number": "+44 20 0000 0000", "type": "WORK"}],
    "twitterHandles": [{"name": "ada"}],
    "birthDateOn": {"month": 12, "day": 10},
    "websites": [
        {"url": "https://ada.example.com", "type": {"com.linkedin.voyager.identity.profile.StandardWebsite": {"category": "PERSONAL"}}},
        {"url": "https://notes.example.com", "type": {"com.linkedin.voyager.identity.profile.CustomWebsite": {"label": "Notes"}}},
    ],
}

HIGHLIGHTS = {"sharedConnections": {"sharedConnectionUrns": []}}

COMPANY = {
    "name": "Engines Ltd",
    "universalName": "engines-ltd",
    "entityUrn": "urn:li:fs_normalized_company:2002",
    "parentCompany": "urn:li:fs_normalized_company:1",
    "companyPageUrl": "https://www.engines.co.uk/about",
    "url": "https://www.linkedin.com/company/engines-ltd",
    "description": "Mechanical computation.",
    "companyType": {"localizedName": "Privately Held"},
    "companyIndustries": [{"localizedName": "Computer Software"}],
    "specialities": ["Difference engines", "Analytical engines"],
    "foundedOn": {"year": 1834},
    "headquarter": {"city": "London", "country": "GB", "line1": "1 Dorset St", "postalCode": "W1U"},
    "followingInfo": {"followerCount": 1843},
    "staffCount": 42,
    "logo": {"image": {"com.linkedin.common.VectorImage": {"id": "/p/logo.png"}}},
    "backgroundCoverImage": {"image": {"original": {"id": "/p/cover.png"}}},
}


@pytest.fixture
def profile_view():
    return copy.deepcopy(PROFILE_VIEW)


@pytest.fixture
def contact_info():
    return copy.deepcopy(CONTACT_INFO)


@pytest.fixture
def highlights():
    return copy.deepcopy(HIGHLIGHTS)


@pytest.fixture
def raw_profile(profile_view, contact_info, highlights):
    merged = {"publicIdentifier": "ada-lovelace"}
    for part in (profile_view, contact_info, highlights):
        merged.update(part)
    return merged


@pytest.fixture
def raw_company():
    return copy.deepcopy(COMPANY)


@pytest.fixture
def make_response():
    return FakeResponse
