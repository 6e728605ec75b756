"""Uploaded image files on disk."""

import os
import random
import re
import time

from loguru import logger

SAFE_EXTENSION = re.compile(r"\.[A-Za-z0-9]+")


class BlobStore:
    def __init__(self, directory, url_prefix="/uploads"):
        self.directory = os.path.abspath(directory)
        self.url_prefix = url_prefix.rstrip("/")

    def new_filename(self, original_name):
        """Unique blob name; only the extension comes from the client."""
        ext = os.path.splitext(os.path.basename(original_name or ""))[1]
        if not SAFE_EXTENSION.fullmatch(ext):
            ext = ""
        return f"{time.time_ns()}-{random.randint(0, 10**9)}{ext.lower()}"

    def path_for(self, filename):
        return os.path.join(self.directory, filename)

    def url_for(self, filename):
        return f"{self.url_prefix}/{filename}"

    def exists(self, filename):
        return os.path.isfile(self.path_for(filename))

    def save(self, file_storage, filename):
        os.makedirs(self.directory, exist_ok=True)
        path = self.path_for(filename)
        file_storage.save(path)
        return path

    def discard(self, filename):
        try:
            os.remove(self.path_for(filename))
        except OSError as e:
            logger.warning("Error deleting image file {}: {}", filename, e)
            return False
        return True

    def filenames(self):
        if not os.path.isdir(self.directory):
            return []
        return sorted(
            name for name in os.listdir(self.directory)
            if os.path.isfile(os.path.join(self.directory, name))
        )
