"""Persistence backends for the catalog document."""

import copy
import json
from pathlib import Path


class CatalogBackend:
    """Where the catalog document lives. ``load`` returns ``None`` when nothing is stored."""

    def load(self):
        raise NotImplementedError

    def save(self, document):
        raise NotImplementedError


class JsonFileBackend(CatalogBackend):
    def __init__(self, path):
        self.path = Path(path)

    def load(self):
        if not self.path.exists():
            return None
        return json.loads(self.path.read_text(encoding="utf-8"))

    def save(self, document):
        # Reescritura completa y síncrona, sin reemplazo atómico
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(document, indent=2), encoding="utf-8")

    def __repr__(self):
        return f"<JsonFileBackend {self.path}>"


class MemoryBackend(CatalogBackend):
    def __init__(self, document=None):
        self.document = copy.deepcopy(document)
        self.saves = 0

    def load(self):
        return copy.deepcopy(self.document)

    def save(self, document):
        self.document = copy.deepcopy(document)
        self.saves += 1
