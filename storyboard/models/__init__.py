from storyboard.models.image import ImageEntry
from storyboard.models.stats import CatalogStatistics

__all__ = ["ImageEntry", "CatalogStatistics"]
