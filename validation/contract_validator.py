"""
Contract Validator

Checks an inbound request body against an agent's request contract.

Two levels:
- validate_request_body: structural only (object shape, required keys
  present, no unknown keys). This is the default gate.
- validate_request_strict: structural check, then the agent's pydantic
  request model (types, enums, numeric ranges). Opt-in via settings.

Both return None when the body is acceptable, otherwise one human-readable
error string. Only the first problem found is reported.
"""

from typing import Any, Optional

from pydantic import ValidationError

from schemas.contracts import REQUEST_MODELS, get_request_schema


def validate_request_body(body: Any, agent_name: str) -> Optional[str]:
    """
    Structural validation against CONTRACT_SCHEMAS[agent_name]["request"].

    Args:
        body: Decoded JSON body (anything)
        agent_name: One of the registered agent names

    Returns:
        None if valid, otherwise the first error found
    """
    if not isinstance(body, dict):
        return "Request body must be a JSON object"

    schema = get_request_schema(agent_name)

    for field in schema.get("required", []):
        if field not in body:
            return f"Missing required field: {field}"

    allowed = schema.get("properties", {})
    for key in body:
        if key not in allowed:
            return f"Unknown field: {key}"

    return None


def validate_request_strict(body: Any, agent_name: str) -> Optional[str]:
    """
    Structural validation followed by typed model validation.

    Enum membership, numeric ranges (e.g. signal.score in [0, 1]) and nested
    required fields are enforced here.
    """
    error = validate_request_body(body, agent_name)
    if error:
        return error

    model = REQUEST_MODELS[agent_name]
    try:
        model.model_validate(body)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first.get("loc", ())) or "body"
        return f"Invalid field: {location} ({first.get('msg', 'invalid value')})"

    return None
