from dataclasses import dataclass


@dataclass
class CatalogStatistics:
    total_visits: int = 0
    total_images: int = 0
    total_favorites: int = 0

    def to_dict(self):
        return {
            "totalVisits": self.total_visits,
            "totalImages": self.total_images,
            "totalFavorites": self.total_favorites,
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            total_visits=int(data.get("totalVisits", 0)),
            total_images=int(data.get("totalImages", 0)),
            total_favorites=int(data.get("totalFavorites", 0)),
        )
