from pydantic import BaseModel


class MarketSegment(BaseModel):
    id: str
    name: str
    sub_segments: list[str] = []


RESIDENTIAL_SEGMENT_ID = "residential"

MARKET_SEGMENTS: list[MarketSegment] = [
    MarketSegment(
        id=RESIDENTIAL_SEGMENT_ID,
        name="Residential/Housing",
        sub_segments=[
            "Apartments and Condos",
            "Assisted Living Facilities",
            "Housing Authority",
        ],
    ),
    MarketSegment(
        id="education",
        name="Education and Non-Profit",
        sub_segments=[
            "Churches and Temples",
            "College and Universities",
            "Education K-12",
            "Goodwill",
            "Head Start",
            "Job Corps",
        ],
    ),
    MarketSegment(
        id="healthcare",
        name="Healthcare and Medical",
        sub_segments=[
            "Dialysis Centers",
            "Hospitals",
            "Medical Offices and Clinics",
            "Veteran Affairs Hospitals",
        ],
    ),
    MarketSegment(
        id="government",
        name="Government and Public Services",
        sub_segments=[
            "Coast Guard",
            "Corrections and Prisons",
            "First Responders",
            "Municipalities",
            "National Park Services",
            "Native American Reservations",
            "Office Buildings",
            "State and Local Parks",
            "U.S. Army Corps of Engineering",
            "U.S. Forest Service",
            "U.S. Department of Agriculture",
        ],
    ),
    MarketSegment(
        id="commercial",
        name="Commercial and Hospitality",
        sub_segments=[
            "Fitness Centers",
            "Funeral Homes",
            "Grocery Stores",
            "Hotels and Lodging Facilities",
            "Indoor Recreation Centers",
        ],
    ),
    MarketSegment(
        id="industrial",
        name="Industrial and Manufacturing",
        sub_segments=[
            "Equipment Rental Facilities",
            "Food Processing Plants",
            "Greenhouses/Cannabis",
            "Manufacturing",
        ],
    ),
    MarketSegment(
        id="specialized",
        name="Specialized",
        sub_segments=["Animal Services"],
    ),
]

# 3-digit ZIP prefixes of the home territory.
ZIP_PREFIX_CONTEXT: dict[str, str] = {
    "206": "Southern Maryland (Charles, Calvert and St. Mary's counties)",
    "207": "Prince George's County, MD, in the Washington DC suburbs",
    "208": "Montgomery County, MD, in the Washington DC suburbs",
    "209": "Silver Spring and Takoma Park, MD",
    "210": "the Baltimore, MD metropolitan area (Howard and Anne Arundel counties)",
    "211": "the Baltimore, MD metropolitan area (Baltimore County)",
    "212": "Baltimore City, MD",
    "214": "Annapolis, MD and the Anne Arundel County shoreline",
    "215": "Western Maryland (Cumberland and Allegany County)",
    "216": "the Eastern Shore of Maryland",
    "217": "Frederick and Washington County, MD",
    "218": "the lower Eastern Shore of Maryland (Salisbury)",
    "219": "Cecil and Harford County, MD",
    "200": "Washington, DC",
    "202": "Washington, DC",
    "203": "Washington, DC",
    "204": "Washington, DC",
    "205": "Washington, DC",
}


def find_segment(name_or_id: str) -> MarketSegment | None:
    key = name_or_id.strip().lower()
    for segment in MARKET_SEGMENTS:
        if key in (segment.id, segment.name.lower()):
            return segment
    return None


def is_residential(segment: str | None) -> bool:
    if not segment:
        return False
    found = find_segment(segment)
    return found is not None and found.id == RESIDENTIAL_SEGMENT_ID
