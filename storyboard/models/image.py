from dataclasses import dataclass
from datetime import datetime, timezone


def iso_timestamp(moment=None):
    moment = moment or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class ImageEntry:
    id: int
    title: str
    description: str
    date: str
    filename: str
    url: str
    is_favorite: bool = False

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "date": self.date,
            "isFavorite": self.is_favorite,
            "filename": self.filename,
            "url": self.url,
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=int(data["id"]),
            title=data["title"],
            description=data["description"],
            date=data["date"],
            filename=data["filename"],
            url=data["url"],
            is_favorite=data.get("isFavorite") is True,
        )

    def __repr__(self):
        return f"<ImageEntry {self.id} {self.filename}>"
