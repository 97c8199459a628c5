from enum import Enum


class ImageStorageType(Enum):
    """Supported product image storage backends."""

    INLINE = "inline"
    CLOUDINARY = "cloudinary"

    @classmethod
    def from_string(cls, value: str) -> "ImageStorageType":
        try:
            return cls(value.strip().lower())
        except ValueError as exc:
            allowed = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown image storage '{value}'. Allowed values: {allowed}.") from exc
