"""Test doubles and sample image bytes."""

JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00\xff\xd9"
PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01"


class FakeUploader:
    """Stands in for ``cloudinary.uploader`` and records every call."""

    def __init__(self):
        self.objects = {}
        self.uploads = []
        self.destroyed = []
        self.upload_error = None
        self.destroy_error = None
        self.destroy_result = None

    def upload(self, content, folder=None, **options):
        if self.upload_error is not None:
            raise self.upload_error
        public_id = f"{folder}/image-{len(self.uploads) + 1}"
        self.uploads.append((public_id, folder))
        self.objects[public_id] = content
        return {
            "public_id": public_id,
            "secure_url": f"https://res.cloudinary.com/demo/image/upload/{public_id}.jpg",
            "resource_type": "image",
        }

    def destroy(self, public_id, **options):
        if self.destroy_error is not None:
            raise self.destroy_error
        self.destroyed.append(public_id)
        if self.destroy_result is not None:
            return {"result": self.destroy_result}
        existed = self.objects.pop(public_id, None) is not None
        return {"result": "ok" if existed else "not found"}

