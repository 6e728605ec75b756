"""Validation and storage of a single uploaded image."""

import os
import time

from loguru import logger

from storyboard.errors import ValidationError
from storyboard.models import ImageEntry
from storyboard.models.image import iso_timestamp


def _stream_size(file_storage):
    stream = file_storage.stream
    position = stream.tell()
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(position)
    return size


class UploadHandler:
    def __init__(self, store, blobs, max_size=10 * 1024 * 1024):
        self.store = store
        self.blobs = blobs
        self.max_size = max_size

    def handle(self, file_storage, title, description):
        """Validate the upload, write its blob and insert the new entry.

        Checks run in order: attachment present, ``image/*`` content type,
        size ceiling, then the text fields. Only the last check happens after
        the blob is on disk, and a failure there discards the blob again.
        """
        if file_storage is None or not file_storage.filename:
            raise ValidationError("No image file provided")

        if not (file_storage.mimetype or "").startswith("image/"):
            raise ValidationError("Only image files are allowed!")

        if _stream_size(file_storage) > self.max_size:
            limit_mb = self.max_size // (1024 * 1024)
            raise ValidationError(f"File too large. Maximum size is {limit_mb}MB.")

        filename = self.blobs.new_filename(file_storage.filename)
        file_storage.stream.seek(0)
        self.blobs.save(file_storage, filename)

        if not (title or "").strip() or not (description or "").strip():
            self.blobs.discard(filename)
            raise ValidationError("Title and description are required")

        entry = ImageEntry(
            id=self.store.next_id(time.time_ns() // 1_000_000),
            title=title,
            description=description,
            date=iso_timestamp(),
            filename=filename,
            url=self.blobs.url_for(filename),
        )
        self.store.insert(entry)
        logger.info("Image uploaded: {} ({})", entry.filename, entry.id)
        return entry
