"""
Entry points for a shapefile reader or writer that has already dealt with
the file and record headers, and holds the content of one point record.
"""

from __future__ import annotations

import io
import logging
from typing import cast

from .constants import SHAPETYPE_LOOKUP
from .exceptions import ShapefileException
from .geometric_calculations import bbox_overlap
from .shapes import SHAPE_CLASS_FROM_SHAPETYPE, EsriShape, PointShape
from .types import BBox, ReadableBinStream, WriteableBinStream

logger = logging.getLogger(__name__)


def read_shape(
    shapeType: int,
    b_io: ReadableBinStream,
    bbox: BBox | None = None,
) -> PointShape | None:
    """Reads the content of one record of the given shape type from b_io.
    If bbox is given, the record is still read in full, but None is
    returned when the point falls outside bbox.
    """
    try:
        ShapeClass = SHAPE_CLASS_FROM_SHAPETYPE[shapeType]
    except KeyError:
        name = SHAPETYPE_LOOKUP.get(shapeType)
        if name is None:
            raise ShapefileException(f"Unknown shape type: {shapeType}")
        raise ShapefileException(
            f"Shape type {shapeType} ({name}) is not a point shape type."
        )

    shape = ShapeClass.from_byte_stream(b_io)

    # skip shape if no overlap with bounding box
    if bbox is not None and not bbox_overlap(bbox, shape.bbox):
        logger.debug("Skipping %r, outside of bbox %r", shape, bbox)
        return None

    return shape


def write_shape(shape: EsriShape, b_io: WriteableBinStream) -> int:
    """Writes the content of one record, returning the number of bytes written."""
    return shape.write_to_byte_stream(b_io)


def shape_to_bytes(shape: EsriShape) -> bytes:
    b_io = io.BytesIO()
    write_shape(shape, b_io)
    return b_io.getvalue()


def shape_from_bytes(shapeType: int, data: bytes) -> PointShape:
    # without a bbox, read_shape never returns None
    return cast(PointShape, read_shape(shapeType, io.BytesIO(data)))
