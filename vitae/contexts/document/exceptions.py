"""Custom exceptions for the document context."""

from typing import Optional


class PersistedStateCorrupt(ValueError):
    """
    Exception raised when the stored résumé cannot be restored.

    Covers malformed JSON, an unexpected payload shape, and schema versions this
    build does not understand. The Record Store recovers locally by discarding
    the stored payload, so this never reaches the user.

    Attributes:
        message: Error description
        storage_key: Key the payload was read from
        payload: The raw stored text (truncated in the message)
    """

    def __init__(
        self,
        message: str,
        storage_key: Optional[str] = None,
        payload: Optional[str] = None,
    ):
        self.message = message
        self.storage_key = storage_key
        self.payload = payload

        parts = [message]

        if storage_key:
            parts.append(f"Storage key: {storage_key}")

        if payload:
            snippet = payload[:200] + "..." if len(payload) > 200 else payload
            parts.append(f"Stored payload:\n{snippet}")

        super().__init__("\n".join(parts))
