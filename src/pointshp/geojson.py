from __future__ import annotations

import logging
import math
from typing import Literal, Protocol, TypedDict

from . import constants
from .types import PointT

logger = logging.getLogger(__name__)


class GeoJSONPoint(TypedDict):
    type: Literal["Point"]
    # RFC7946 only requires: "A position is an array of numbers.  There MUST be
    # two or more elements."  Despite the SHOULD NOT, we use a 3rd or 4th
    # element for Shapefile M Measures, as None when the measure is nodata.
    coordinates: PointT


class HasGeoInterface(Protocol):
    @property
    def __geo_interface__(self) -> GeoJSONPoint: ...


class _NamedShape(Protocol):
    @property
    def shapeTypeName(self) -> str: ...


def point_geo_interface(
    shape: _NamedShape, coordinates: PointT
) -> GeoJSONPoint:
    # if VERBOSE is True, warn about coordinates GeoJSON readers cannot handle
    if constants.VERBOSE and not all(
        math.isfinite(c) for c in coordinates if c is not None
    ):
        logger.warning(
            "Possible issue encountered when converting %s to GeoJSON: "
            "non-finite coordinates %r are not valid JSON numbers.",
            shape.shapeTypeName,
            coordinates,
        )
    return {"type": "Point", "coordinates": coordinates}
