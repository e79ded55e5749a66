import re

from prospector.schemas.query import QueryPlan, ToolConfig
from prospector.schemas.search import CURRENT_LOCATION, SearchRequest
from prospector.segments import ZIP_PREFIX_CONTEXT, is_residential

GROUNDING_TOOLS = [{"googleMaps": {}}, {"googleSearch": {}}]

GENERIC_PHRASE = (
    "high-potential commercial, institutional, and industrial facilities "
    "(e.g. healthcare, manufacturing, education, hospitality)"
)
RESIDENTIAL_PHRASE = (
    "multi-family housing communities (apartment complexes, condominiums) and "
    "the property-management offices that run them. Do NOT list private homes "
    "or single-family residences"
)

_ZIP_RE = re.compile(r"\b(\d{3})\d{2}(?:-\d{4})?\b")

_INSTRUCTION = (
    "You are a sales prospecting assistant for State Industrial Products "
    "(Chemical Division). You find active B2B prospects using Google Maps and "
    "Google Search grounding.\n"
    "Data purity rules:\n"
    "1. Never invent contact data. If a phone number, email, or zip code is not "
    'available, leave the field as an empty string "". Do not write placeholder '
    'text such as "N/A", "Unknown", "Pending" or "Contact via web".\n'
    "2. Respond with a single raw JSON array and nothing else: no commentary "
    "before or after it and no Markdown code fences.\n"
    "3. Always attempt an answer from the map and web results you found. Do not "
    "decline because some details are missing; return what the citations support."
)

_PROMPT_TEMPLATE = (
    'Find business prospects in the target location: "{location}".{region}\n'
    "Search in and around {location} for {category}. List 15-20 relevant, "
    "currently active businesses.\n\n"
    "Focus on businesses that would benefit from State Chemical's primary product lines:\n"
    "- Air Care (odor control, scenting)\n"
    "- Drain Care (maintenance, blockage prevention)\n"
    "- Wastewater (treatment solutions)\n"
    "- Water Treatment (cooling towers, boilers, closed loops)\n\n"
    "Each array element must be an object with exactly these string properties: "
    '"name", "phone", "email", "address", "city", "state", "zip", "notes".\n'
    '- "address" is the street address only (e.g. 123 Main St).\n'
    '- "city", "state" and "zip" are taken from the full address.\n'
    '- "notes" must contain the market segment, the likely services needed '
    "(Air Care, Drain Care, Wastewater, Water Treatment) and any other notable details."
)


def category_phrase(segment: str | None, sub_segment: str | None) -> str:
    if is_residential(segment):
        if sub_segment:
            return f"{RESIDENTIAL_PHRASE}, with a focus on {sub_segment}"
        return RESIDENTIAL_PHRASE
    if sub_segment and segment:
        return f"{sub_segment} ({segment}) businesses"
    if sub_segment or segment:
        return f"{sub_segment or segment} businesses"
    return GENERIC_PHRASE


def regional_context(location: str) -> str | None:
    """Known territory context for a postal code or named sentinel, if any."""
    if location == CURRENT_LOCATION:
        return "the area immediately surrounding the user's current coordinates"
    match = _ZIP_RE.search(location)
    if match:
        return ZIP_PREFIX_CONTEXT.get(match.group(1))
    return None


def build_query(request: SearchRequest) -> QueryPlan:
    region = regional_context(request.location)
    prompt = _PROMPT_TEMPLATE.format(
        location=request.location,
        region=f" Regional context: {region}." if region else "",
        category=category_phrase(request.segment, request.sub_segment),
    )
    return QueryPlan(
        instruction=_INSTRUCTION,
        prompt=prompt,
        tool_config=ToolConfig(
            tools=[dict(tool) for tool in GROUNDING_TOOLS],
            location_bias=request.coordinates,
        ),
    )
