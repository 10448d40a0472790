"""Encoding and decoding between wire documents and schema models."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, TypeVar, get_args, get_origin

from pydantic import BaseModel, ValidationError

from ..models import (
    FlightOption,
    ResponseBody,
    SchemaDecodeError,
    SearchPayload,
    SearchResponse,
)

M = TypeVar("M", bound=BaseModel)


@dataclass(slots=True)
class SearchCodec:
    """Pure conversion helpers to keep the client orchestration slim."""

    def encode(self, model: BaseModel) -> bytes:
        """Serialize a model to its wire form, leaving unset optionals out."""
        return model.model_dump_json(by_alias=True, exclude_unset=True).encode("utf-8")

    def encode_payload(self, payload: SearchPayload) -> bytes:
        return self.encode(payload)

    def decode(self, model_cls: type[M], body: bytes | str) -> M:
        """
        Parse a JSON document into `model_cls`.

        Validation is strict: a JSON string is never coerced into a bool or
        number, so anything accepted re-encodes to the same document.

        Raises:
            SchemaDecodeError: naming the offending field and its containing type
        """
        try:
            return model_cls.model_validate_json(body, strict=True)
        except ValidationError as exc:
            raise _schema_error(model_cls, exc) from exc

    def decode_response(self, body: bytes | str) -> SearchResponse:
        return self.decode(SearchResponse, body)

    def decode_payload(self, body: bytes | str) -> SearchPayload:
        return self.decode(SearchPayload, body)

    @staticmethod
    def flatten_options(body: ResponseBody) -> list[FlightOption]:
        """Concatenate every leg's options, keeping leg and option order."""
        options: list[FlightOption] = []
        for leg in body.origin_destination_information_list:
            options.extend(leg.origin_destination_option_list)
        return options


def _schema_error(model_cls: type[BaseModel], exc: ValidationError) -> SchemaDecodeError:
    first = exc.errors()[0]
    if first["type"] == "json_invalid":
        return SchemaDecodeError(model_cls.__name__, None, first["msg"])

    loc: Sequence[Any] = first["loc"]
    field_index = _last_name_index(loc)
    if field_index is None:
        return SchemaDecodeError(model_cls.__name__, None, first["msg"])

    container = _resolve_container(model_cls, loc[:field_index])
    reason = "missing" if first["type"] == "missing" else first["msg"]
    return SchemaDecodeError(container.__name__, str(loc[field_index]), reason)


def _last_name_index(loc: Sequence[Any]) -> int | None:
    for index in range(len(loc) - 1, -1, -1):
        if isinstance(loc[index], str):
            return index
    return None


def _resolve_container(model_cls: type[BaseModel], path: Sequence[Any]) -> type[BaseModel]:
    current = model_cls
    for part in path:
        # list indices
        if not isinstance(part, str):
            continue
        annotation = _field_annotation(current, part)
        nested = _nested_model(annotation)
        if nested is None:
            break
        current = nested
    return current


def _field_annotation(model_cls: type[BaseModel], wire_name: str) -> Any:
    for name, info in model_cls.model_fields.items():
        if wire_name in (name, info.alias):
            return info.annotation
    return None


def _nested_model(annotation: Any) -> type[BaseModel] | None:
    if annotation is None:
        return None
    if get_origin(annotation) is None:
        if isinstance(annotation, type) and issubclass(annotation, BaseModel):
            return annotation
        return None
    for arg in get_args(annotation):
        found = _nested_model(arg)
        if found is not None:
            return found
    return None
