"""Email validation payloads.

An email attachment may itself be an email, so ``EmailAttachment.validated``
refers back to ``EmailValidateResponse``; the forward reference is resolved
by ``model_rebuild`` once the whole module is defined.
"""

from typing import Annotated, Literal, Union

from pydantic import Field

from maradocs.models.common import Handle, WireModel
from maradocs.models.data import DataMediaTypeResponse
from maradocs.models.img import ImgValidateResponse
from maradocs.models.pdf import PdfValidateResponse
from maradocs.models.validation import (
    ValidateEnvelope,
    ValidateResponseError,
    ValidateResponseOk,
    ValidateResponseVirus,
)

# (display name or None, address)
NamedAddress = tuple[str | None, str]
AddressField = list[NamedAddress] | str | None

AttachmentValidation = Annotated[
    Union[PdfValidateResponse, ImgValidateResponse, "EmailValidateResponse"],
    Field(discriminator="class_name"),
]


class EmailAttachment(WireModel):
    class_name: Literal["EmailAttachment"] = "EmailAttachment"
    unvalidated_file_handle: Handle
    media_type: DataMediaTypeResponse
    # Only set for attachments the server could validate (PDF, image, email).
    validated: AttachmentValidation | None = None
    name: str | None = None
    content_id: str | None = None
    content_disposition: str | None = None


class EmailHandle(WireModel):
    """Validated email with parsed headers and references to its parts."""

    class_name: Literal["EmailHandle"] = "EmailHandle"
    file_handle: Handle
    signed_hash: Handle
    from_addr: AddressField = None
    to_addr: AddressField = None
    cc_addr: AddressField = None
    bcc_addr: AddressField = None
    date: str | None = None
    subject: str | None = None
    text_body: Handle = None
    html_body: Handle = None
    attachments: list[EmailAttachment] = Field(default_factory=list)


class EmailValidateRequest(WireModel):
    unvalidated_file_handle: Handle
    limit_attachments: Annotated[int, Field(gt=0)] = 50


class EmailValidateResponseOk(ValidateResponseOk):
    class_name: Literal["EmailValidateResponseOk"] = "EmailValidateResponseOk"
    email_handle: EmailHandle

    @property
    def handle(self) -> EmailHandle:
        return self.email_handle


class EmailValidateResponseError(ValidateResponseError):
    class_name: Literal["EmailValidateResponseError"] = "EmailValidateResponseError"


class EmailValidateResponseVirus(ValidateResponseVirus):
    class_name: Literal["EmailValidateResponseVirus"] = "EmailValidateResponseVirus"


EmailValidateResult = Annotated[
    Union[EmailValidateResponseOk, EmailValidateResponseError, EmailValidateResponseVirus],
    Field(discriminator="class_name"),
]


class EmailValidateResponse(ValidateEnvelope):
    class_name: Literal["EmailValidateResponse"] = "EmailValidateResponse"
    response: EmailValidateResult


EmailAttachment.model_rebuild()
EmailHandle.model_rebuild()
EmailValidateResponseOk.model_rebuild()
EmailValidateResponse.model_rebuild()
