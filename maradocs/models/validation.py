"""Base shapes shared by every validation job result.

Each content kind (image, PDF, HTML, email) answers a validation job with
an envelope whose ``response`` field is one of three tagged variants.
Concrete kinds subclass these bases so the unwrapper can branch on the
variant without per-kind logic.
"""

from maradocs.models.common import Handle, WireModel


class ValidateResponseOk(WireModel):
    """Validation succeeded; ``handle`` is the validated content."""

    @property
    def handle(self) -> Handle:
        raise NotImplementedError


class ValidateResponseError(WireModel):
    error: str


class ValidateResponseVirus(WireModel):
    virus: str


class ValidateEnvelope(WireModel):
    """Outer validation response; subclasses declare the ``response`` union."""
