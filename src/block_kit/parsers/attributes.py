# parsers/attributes.py

from pydantic import JsonValue, TypeAdapter, ValidationError

_ATTRIBUTES_ADAPTER: TypeAdapter[dict[str, JsonValue]] = TypeAdapter(
    dict[str, JsonValue]
)


class MalformedAttributesError(ValueError):
    """Attribute text is present but is not a JSON object."""


def parse_attributes(raw: str) -> dict[str, JsonValue]:
    """Parse the text between a block name and its delimiter terminator.

    Args:
        raw: Attribute payload as captured by the tokenizer.

    Returns:
        The decoded JSON object, keys in document order. Empty payloads
        yield an empty dict.

    Raises:
        MalformedAttributesError: If the payload is not a valid JSON object.
    """
    payload = raw.strip()
    if not payload:
        return {}

    try:
        return _ATTRIBUTES_ADAPTER.validate_json(payload.encode("utf-8"))
    except (ValidationError, UnicodeEncodeError) as exc:
        raise MalformedAttributesError(
            f"Invalid block attributes: {payload[:80]!r}"
        ) from exc
