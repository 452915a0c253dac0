from __future__ import annotations

from .constants import NODATA
from .types import BBox


def is_no_data(value: float) -> bool:
    """Measure values at or below NODATA mean 'no data' in the shapefile format."""
    return value <= NODATA


def bbox_overlap(bbox1: BBox, bbox2: BBox) -> bool:
    """Tests whether two bounding boxes overlap."""
    xmin1, ymin1, xmax1, ymax1 = bbox1
    xmin2, ymin2, xmax2, ymax2 = bbox2
    overlap = xmin1 <= xmax2 and xmin2 <= xmax1 and ymin1 <= ymax2 and ymin2 <= ymax1
    return overlap
