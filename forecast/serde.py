"""JSON (de)serialization of API responses."""

from __future__ import annotations

from enum import Enum
import json
import logging
import typing
from typing import Any

from pydantic import BaseModel, ValidationError

from forecast.errors import MalformedResponse, UnrecognizedTag
from forecast.models.response import ApiResponse

logger = logging.getLogger("forecast.serde")


def _unwrap(annotation: Any) -> Any:
    # Optional[X] and list[X] both resolve to X
    args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
    while args:
        annotation = args[0]
        args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
    return annotation


def _tag_type(loc: tuple[Any, ...]) -> str:
    """Name the enum expected at ``loc``, walking the response model."""

    model: type[BaseModel] | None = ApiResponse
    annotation: Any = None
    for part in loc:
        if isinstance(part, int):
            continue
        if model is None:
            break
        info = next(
            (f for name, f in model.model_fields.items() if part in (name, f.alias)),
            None,
        )
        if info is None:
            break
        annotation = _unwrap(info.annotation)
        model = annotation if isinstance(annotation, type) and issubclass(annotation, BaseModel) else None

    if isinstance(annotation, type) and issubclass(annotation, Enum):
        return annotation.__name__
    return "tag"


def _translate(exc: ValidationError) -> MalformedResponse:
    errors = exc.errors(include_url=False)
    first = errors[0] if errors else {}
    path = tuple(first.get("loc", ()))
    if first.get("type") == "enum":
        return UnrecognizedTag(_tag_type(path), first.get("input"), path=path)
    location = ".".join(str(part) for part in path) or "<root>"
    return MalformedResponse(
        f"Malformed response at {location}: {first.get('msg', exc)}", path=path
    )


def parse_response(body: str | bytes) -> ApiResponse:
    """Deserialize a JSON response body into an :class:`ApiResponse`.

    Fields are matched by wire name only and types are checked strictly:
    absent optional fields are left as ``None``, while invalid JSON, a type
    mismatch or a missing required field raises :class:`MalformedResponse`.
    An unknown enumerated value raises :class:`UnrecognizedTag`.
    """

    try:
        response = ApiResponse.model_validate_json(body, by_alias=True, by_name=False)
    except ValidationError as exc:
        raise _translate(exc) from exc
    logger.debug(
        "Parsed response for %s,%s (%s)", response.latitude, response.longitude, response.timezone
    )
    return response


def parse_payload(payload: Any) -> ApiResponse:
    """Validate already-decoded JSON into an :class:`ApiResponse`.

    The payload is re-encoded so it gets the same JSON-mode checks as
    :func:`parse_response`.
    """

    try:
        body = json.dumps(payload)
    except (TypeError, ValueError) as exc:
        raise MalformedResponse(f"Payload is not JSON-serializable: {exc}") from exc
    return parse_response(body)


def dump_payload(response: ApiResponse) -> dict[str, Any]:
    """Serialize a response back to a JSON-ready dict using wire names."""

    return response.model_dump(mode="json", by_alias=True, exclude_none=True)


def dump_response(response: ApiResponse) -> str:
    """Serialize a response back to JSON text using wire names."""

    return response.model_dump_json(by_alias=True, exclude_none=True)


__all__ = ["dump_payload", "dump_response", "parse_payload", "parse_response"]
