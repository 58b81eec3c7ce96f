from typing import Annotated, Literal, Union

from pydantic import Field

from maradocs.models.common import Handle, WireModel
from maradocs.models.validation import (
    ValidateEnvelope,
    ValidateResponseError,
    ValidateResponseOk,
    ValidateResponseVirus,
)


class HtmlValidateRequest(WireModel):
    unvalidated_file_handle: Handle


class HtmlValidateResponseOk(ValidateResponseOk):
    class_name: Literal["HtmlValidateResponseOk"] = "HtmlValidateResponseOk"
    html_handle: Handle

    @property
    def handle(self) -> Handle:
        return self.html_handle


class HtmlValidateResponseError(ValidateResponseError):
    class_name: Literal["HtmlValidateResponseError"] = "HtmlValidateResponseError"


class HtmlValidateResponseVirus(ValidateResponseVirus):
    class_name: Literal["HtmlValidateResponseVirus"] = "HtmlValidateResponseVirus"


HtmlValidateResult = Annotated[
    Union[HtmlValidateResponseOk, HtmlValidateResponseError, HtmlValidateResponseVirus],
    Field(discriminator="class_name"),
]


class HtmlValidateResponse(ValidateEnvelope):
    class_name: Literal["HtmlValidateResponse"] = "HtmlValidateResponse"
    response: HtmlValidateResult


class HtmlToPdfRequest(WireModel):
    html_handle: Handle


class HtmlToPdfResponse(WireModel):
    pdf_handle: Handle
