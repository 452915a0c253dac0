"""
pointshp
Reads and writes the point records (Point, PointM and PointZ)
of ESRI Shapefiles.
Compatible with Python versions >=3.9
"""

from __future__ import annotations

import logging
import sys

from .__version__ import __version__
from ._doctest_runner import _test
from .constants import (
    MULTIPATCH,
    MULTIPOINT,
    MULTIPOINTM,
    MULTIPOINTZ,
    NODATA,
    NULL,
    POINT,
    POINTM,
    POINTZ,
    POLYGON,
    POLYGONM,
    POLYGONZ,
    POLYLINE,
    POLYLINEM,
    POLYLINEZ,
    SHAPETYPE_LOOKUP,
    SHAPETYPENUM_LOOKUP,
)
from .exceptions import ShapefileException, ShapeRecordReadError
from .geojson import GeoJSONPoint, HasGeoInterface
from .geometric_calculations import bbox_overlap, is_no_data
from .records import read_shape, shape_from_bytes, shape_to_bytes, write_shape
from .shapes import (
    SHAPE_CLASS_FROM_SHAPETYPE,
    BoundingBox,
    EsriShape,
    HasM,
    HasZ,
    Point,
    PointM,
    PointShape,
    PointZ,
    ReadableShape,
)
from .types import (
    BBox,
    MBox,
    Point2D,
    PointMT,
    PointT,
    PointZT,
    ReadableBinStream,
    WriteableBinStream,
    ZBox,
)

__all__ = [
    "__version__",
    "NULL",
    "POINT",
    "POLYLINE",
    "POLYGON",
    "MULTIPOINT",
    "POINTZ",
    "POLYLINEZ",
    "POLYGONZ",
    "MULTIPOINTZ",
    "POINTM",
    "POLYLINEM",
    "POLYGONM",
    "MULTIPOINTM",
    "MULTIPATCH",
    "NODATA",
    "SHAPETYPE_LOOKUP",
    "SHAPETYPENUM_LOOKUP",
    "ShapefileException",
    "ShapeRecordReadError",
    "GeoJSONPoint",
    "HasGeoInterface",
    "bbox_overlap",
    "is_no_data",
    "read_shape",
    "write_shape",
    "shape_to_bytes",
    "shape_from_bytes",
    "SHAPE_CLASS_FROM_SHAPETYPE",
    "BoundingBox",
    "EsriShape",
    "HasM",
    "HasZ",
    "ReadableShape",
    "Point",
    "PointM",
    "PointZ",
    "PointShape",
    "BBox",
    "MBox",
    "ZBox",
    "Point2D",
    "PointMT",
    "PointZT",
    "PointT",
    "ReadableBinStream",
    "WriteableBinStream",
]

logger = logging.getLogger(__name__)


def main() -> None:
    """
    Doctests are contained in the file 'README.md', and are tested using the built-in
    testing libraries.
    """
    failure_count = _test()
    sys.exit(failure_count)
