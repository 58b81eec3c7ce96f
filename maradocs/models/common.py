"""Shared wire types for the MaraDocs API."""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, JsonValue

# Server-issued reference to content at one processing stage. Passed back
# verbatim; the client never looks inside.
Handle = JsonValue

DiscreteAngle = Literal[0, 90, 180, 270]
Confidence = Annotated[float, Field(ge=0.0, le=1.0)]
PdfImgQuality = Annotated[int, Field(ge=1, le=100)]
# Colour mode understood by the server, e.g. "original".
PdfImgColor = str
Dpi = Annotated[int, Field(ge=30, le=600)]


class WireModel(BaseModel):
    """Base for request and response payloads."""

    model_config = ConfigDict(extra="ignore")


class TaskCreatedResponse(WireModel):
    job_id: str


class ApiErrorDetail(WireModel):
    code: int
    name: str
    message: str


class HttpErrorResponse(WireModel):
    status_code: int
    api_error: ApiErrorDetail


class PdfPageSize(WireModel):
    """Page size in millimetres."""

    width: Annotated[float, Field(gt=0)]
    height: Annotated[float, Field(gt=0)]
