"""In-memory catalog aggregate, rewritten to its backend after every mutation."""

import dataclasses

from loguru import logger

from storyboard.errors import ImageNotFoundError
from storyboard.models import CatalogStatistics, ImageEntry


class CatalogStore:
    def __init__(self, backend):
        self.backend = backend
        self._images = []
        self._stats = CatalogStatistics()

    def load(self):
        """Read the stored document, falling back to an empty catalog."""
        try:
            document = self.backend.load()
            if document is None:
                logger.info("No existing data found, starting fresh")
                images, stats = [], CatalogStatistics()
            else:
                images = [ImageEntry.from_dict(item) for item in document.get("images", [])]
                stats = CatalogStatistics.from_dict(document.get("stats", {}))
        except (ValueError, OSError, KeyError, TypeError, AttributeError) as e:
            logger.warning("Catalog document unreadable, starting fresh: {}", e)
            images, stats = [], CatalogStatistics()

        self._images = images
        self._stats = stats
        self._recount()
        logger.info("Catalog loaded: {} image(s)", len(self._images))

    def list_images(self):
        # Copias: solo el store modifica las entradas
        return [dataclasses.replace(image) for image in self._images]

    def get_stats(self):
        return dataclasses.replace(self._stats)

    def get(self, image_id):
        return dataclasses.replace(self._find(image_id))

    def next_id(self, now_ms):
        # Los ids siguen el reloj, pero nunca se repiten
        latest = max((image.id for image in self._images), default=0)
        return max(now_ms, latest + 1)

    def insert(self, entry):
        self._images.insert(0, dataclasses.replace(entry))
        self._recount()
        self._save()

    def toggle_favorite(self, image_id):
        image = self._find(image_id)
        image.is_favorite = not image.is_favorite
        self._recount()
        self._save()
        return image.is_favorite

    def delete(self, image_id):
        image = self._find(image_id)
        self._images = [item for item in self._images if item is not image]
        self._recount()
        self._save()
        return image

    def record_visit(self):
        self._stats.total_visits += 1
        self._save()
        return self._stats.total_visits

    def to_document(self):
        return {
            "images": [image.to_dict() for image in self._images],
            "stats": self._stats.to_dict(),
        }

    def _find(self, image_id):
        for image in self._images:
            if image.id == image_id:
                return image
        raise ImageNotFoundError(image_id)

    def _recount(self):
        # Recalcular desde cero, nunca incrementalmente
        self._stats.total_images = len(self._images)
        self._stats.total_favorites = sum(1 for image in self._images if image.is_favorite)

    def _save(self):
        self.backend.save(self.to_document())
