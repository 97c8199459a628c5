from dataclasses import dataclass
from typing import Any, Optional

from core.exceptions import ImageReadError

DEFAULT_IMAGE_TYPE = "application/octet-stream"


@dataclass(frozen=True, slots=True)
class ImagePayload:
    """Image bytes received with a create/update request."""

    content: bytes
    filename: str = ""
    content_type: str = DEFAULT_IMAGE_TYPE

    @classmethod
    def from_upload(cls, upload: Any) -> Optional["ImagePayload"]:
        """Read a Django ``UploadedFile``. Returns ``None`` for an empty upload."""
        if upload is None:
            return None
        try:
            upload.seek(0)
            content = upload.read()
        except (OSError, ValueError) as exc:
            raise ImageReadError(f"Error processing request: {exc}") from exc

        if not content:
            return None

        return cls(
            content=bytes(content),
            filename=getattr(upload, "name", "") or "",
            content_type=getattr(upload, "content_type", None) or DEFAULT_IMAGE_TYPE,
        )

    @property
    def size(self) -> int:
        return len(self.content)


@dataclass(frozen=True, slots=True)
class UploadResult:
    """Locator returned by a remote media store."""

    url: str
    public_id: str
