"""Product image storage configuration."""

import os

from .environment import env_int

# "inline" keeps bytes in the products table, "cloudinary" delegates to the media host.
IMAGE_STORAGE = os.getenv("IMAGE_STORAGE", "inline").strip().lower()
MEDIA_STORE_FOLDER = os.getenv("MEDIA_STORE_FOLDER", "products")

# Empty values are skipped so CLOUDINARY_URL, read by the SDK itself, still works.
CLOUDINARY = {
    "cloud_name": os.getenv("CLOUDINARY_CLOUD_NAME", ""),
    "api_key": os.getenv("CLOUDINARY_API_KEY", ""),
    "api_secret": os.getenv("CLOUDINARY_API_SECRET", ""),
}

MAX_UPLOAD_SIZE_MB = env_int("MAX_UPLOAD_SIZE_MB", 10)
DATA_UPLOAD_MAX_MEMORY_SIZE = MAX_UPLOAD_SIZE_MB * 1024 * 1024
FILE_UPLOAD_MAX_MEMORY_SIZE = DATA_UPLOAD_MAX_MEMORY_SIZE

__all__ = [
    "IMAGE_STORAGE",
    "MEDIA_STORE_FOLDER",
    "CLOUDINARY",
    "DATA_UPLOAD_MAX_MEMORY_SIZE",
    "FILE_UPLOAD_MAX_MEMORY_SIZE",
]
