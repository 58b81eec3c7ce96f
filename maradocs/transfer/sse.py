import base64
import hashlib


def compute_sse_c_headers(encryption_key: bytes) -> dict[str, str]:
    """Headers the storage backend needs to decrypt customer-encrypted objects."""
    key_md5 = hashlib.md5(encryption_key).digest()
    return {
        "x-amz-server-side-encryption-customer-algorithm": "AES256",
        "x-amz-server-side-encryption-customer-key": base64.b64encode(encryption_key).decode("ascii"),
        "x-amz-server-side-encryption-customer-key-md5": base64.b64encode(key_md5).decode("ascii"),
    }
