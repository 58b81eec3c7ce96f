from maradocs.models.common import Handle
from maradocs.models.validation import (
    ValidateEnvelope,
    ValidateResponseError,
    ValidateResponseOk,
    ValidateResponseVirus,
)
from maradocs.validation.exceptions import ThreatDetectedError, ValidationError


def unwrap(result: object) -> Handle:
    """Return the validated handle from a validation result.

    Accepts either the envelope returned by a ``validate`` job or the inner
    variant, for any content kind.

    Raises:
        ValidationError: if the server reported the content as invalid, or
            the variant is not one of the known three.
        ThreatDetectedError: if the virus scan flagged the content.
    """
    variant = result.response if isinstance(result, ValidateEnvelope) else result
    if isinstance(variant, ValidateResponseOk):
        return variant.handle
    if isinstance(variant, ValidateResponseError):
        raise ValidationError(variant.error)
    if isinstance(variant, ValidateResponseVirus):
        raise ThreatDetectedError(variant.virus)
    raise ValidationError("unknown validation response type")
