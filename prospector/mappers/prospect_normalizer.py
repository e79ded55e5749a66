from prospector.exceptions.custom import EmptyResultError
from prospector.schemas.search import Prospect

PLACEHOLDER_VALUES = frozenset({
    "n/a", "none", "unknown", "null", "pending",
    "no phone", "no email", "not found", "contact via web",
})

FIELD_DEFAULTS: dict[str, str] = {
    "name": "Unnamed Business",
    "phone": "",
    "email": "",
    "address": "Address not listed",
    "city": "City not listed",
    "state": "",
    "zip": "Zip not listed",
    "notes": "Commercial prospect identified through grounded map and web search.",
}


def clean_value(value: object) -> str:
    """Return ``value`` as text, or "" for missing, blank and placeholder values.

    Placeholders are matched on the trimmed value; anything else is returned as is.
    """
    if value is None or isinstance(value, (dict, list)):
        return ""
    text = value if isinstance(value, str) else str(value)
    stripped = text.strip()
    if not stripped or stripped.lower() in PLACEHOLDER_VALUES:
        return ""
    return text


def normalize_record(raw: object) -> Prospect:
    record = raw if isinstance(raw, dict) else {}
    fields = {
        field: clean_value(record.get(field)) or default
        for field, default in FIELD_DEFAULTS.items()
    }
    return Prospect(**fields)


def normalize(raw_records: object) -> list[Prospect]:
    if not isinstance(raw_records, list) or not raw_records:
        raise EmptyResultError()
    return [normalize_record(raw) for raw in raw_records]
