import base64
import binascii
import json

from pydantic import BaseModel, field_validator
from pydantic import ValidationError as PydanticValidationError

from maradocs.exceptions import MaraDocsError

# The secret is base64(signing key || JSON payload).
SIGNING_KEY_LENGTH = 64


class InvalidWorkspaceSecretError(MaraDocsError):
    """Raised when a workspace secret cannot be decoded."""


class WorkspaceInfo(BaseModel):
    """Public part of a workspace secret."""

    account_id: str
    subaccount: str | None = None
    workspace_id: str
    encryption_key: str

    @field_validator("encryption_key")
    @classmethod
    def _check_base64(cls, value: str) -> str:
        try:
            base64.b64decode(value, validate=True)
        except binascii.Error as exc:
            raise ValueError("encryption_key must be base64") from exc
        return value

    @property
    def encryption_key_bytes(self) -> bytes:
        return base64.b64decode(self.encryption_key)


def decode_workspace_info(workspace_secret: str) -> WorkspaceInfo:
    """Read account, workspace and encryption key from a workspace secret.

    Raises:
        InvalidWorkspaceSecretError: if the secret is not in the expected format.
    """
    try:
        decoded = base64.b64decode(workspace_secret, validate=True)
        payload = json.loads(decoded[SIGNING_KEY_LENGTH:].decode("utf-8"))
        return WorkspaceInfo.model_validate(payload)
    except (
        binascii.Error,
        UnicodeDecodeError,
        json.JSONDecodeError,
        PydanticValidationError,
    ) as exc:
        raise InvalidWorkspaceSecretError(f"Invalid workspace secret: {exc}") from exc
