from __future__ import annotations

from struct import Struct, error
from typing import ClassVar, NamedTuple, Protocol, TypeVar, Union, runtime_checkable

from .constants import NODATA, POINT, POINTM, POINTZ, SHAPETYPE_LOOKUP
from .exceptions import ShapefileException, ShapeRecordReadError
from .geojson import GeoJSONPoint, point_geo_interface
from .geometric_calculations import is_no_data
from .types import MBox, ReadableBinStream, WriteableBinStream, ZBox

_S = TypeVar("_S", covariant=True)

_Struct_1d = Struct("<d")
_Struct_2d = Struct("<2d")
_Struct_3d = Struct("<3d")
_Struct_4d = Struct("<4d")


class BoundingBox(NamedTuple):
    xmin: float
    ymin: float
    xmax: float
    ymax: float


@runtime_checkable
class ReadableShape(Protocol[_S]):
    """Anything that can be decoded from a shape record's content.

    shapeType is a class level constant, so a reader can pick the
    class to decode with before any instance exists.
    """

    shapeType: ClassVar[int]
    size: ClassVar[int]

    @classmethod
    def from_byte_stream(cls, b_io: ReadableBinStream) -> _S: ...


@runtime_checkable
class EsriShape(Protocol):
    """Anything that can be written as a shape record's content."""

    shapeType: int
    size: int

    @property
    def bbox(self) -> BoundingBox: ...

    def write_to_byte_stream(self, b_io: WriteableBinStream) -> int: ...


@runtime_checkable
class HasM(EsriShape, Protocol):
    @property
    def mbox(self) -> MBox: ...


@runtime_checkable
class HasZ(EsriShape, Protocol):
    @property
    def zbox(self) -> ZBox: ...


def _read_exactly(
    b_io: ReadableBinStream,
    size: int,
    ShapeClass: type[ReadableShape[object]],
    offset: int = 0,
) -> bytes:
    """Reads size bytes of a record, offset bytes into it."""
    data = b_io.read(size)
    got = len(data) if data else 0
    if got < size:
        raise ShapeRecordReadError(
            "Unexpected end of stream while reading "
            f"{SHAPETYPE_LOOKUP[ShapeClass.shapeType]} record. "
            f"Expected {ShapeClass.size} bytes, got {offset + got}."
        )
    return data


def _mbox_from_m(m: float) -> MBox:
    # Measure values less than -10e38 are nodata values in the shapefile format
    if is_no_data(m):
        return 0.0, 0.0
    return m, m


class Point(NamedTuple):
    x: float = 0.0
    y: float = 0.0

    shapeType = POINT
    size = _Struct_2d.size

    @staticmethod
    def _x_y_from_byte_stream(
        b_io: ReadableBinStream, ShapeClass: type[ReadableShape[object]]
    ) -> tuple[float, float]:
        x, y = _Struct_2d.unpack(_read_exactly(b_io, _Struct_2d.size, ShapeClass))
        return x, y

    @classmethod
    def from_byte_stream(cls, b_io: ReadableBinStream) -> Point:
        x, y = Point._x_y_from_byte_stream(b_io, cls)
        return cls(x, y)

    def write_to_byte_stream(self, b_io: WriteableBinStream) -> int:
        try:
            record = _Struct_2d.pack(self.x, self.y)
        except error:
            raise ShapefileException(
                f"Failed to write point {self!r}. Expected floats."
            )
        return b_io.write(record)

    @property
    def bbox(self) -> BoundingBox:
        # create bounding box for Point by duplicating coordinates
        return BoundingBox(self.x, self.y, self.x, self.y)

    @property
    def shapeTypeName(self) -> str:
        return SHAPETYPE_LOOKUP[self.shapeType]

    @property
    def __geo_interface__(self) -> GeoJSONPoint:
        return point_geo_interface(self, (self.x, self.y))


class PointM(NamedTuple):
    x: float = 0.0
    y: float = 0.0
    # PyShp encodes missing m values as NODATA
    m: float = NODATA

    shapeType = POINTM
    size = _Struct_3d.size

    @classmethod
    def from_byte_stream(cls, b_io: ReadableBinStream) -> PointM:
        x, y = Point._x_y_from_byte_stream(b_io, cls)
        (m,) = _Struct_1d.unpack(_read_exactly(b_io, _Struct_1d.size, cls, Point.size))
        return cls(x, y, m)

    def write_to_byte_stream(self, b_io: WriteableBinStream) -> int:
        try:
            record = _Struct_3d.pack(self.x, self.y, self.m)
        except error:
            raise ShapefileException(
                f"Failed to write measured point {self!r}. Expected floats."
            )
        return b_io.write(record)

    @property
    def bbox(self) -> BoundingBox:
        return BoundingBox(self.x, self.y, self.x, self.y)

    @property
    def mbox(self) -> MBox:
        return _mbox_from_m(self.m)

    @property
    def shapeTypeName(self) -> str:
        return SHAPETYPE_LOOKUP[self.shapeType]

    @property
    def __geo_interface__(self) -> GeoJSONPoint:
        m = None if is_no_data(self.m) else self.m
        return point_geo_interface(self, (self.x, self.y, m))


class PointZ(NamedTuple):
    """A point with an elevation and a measure.

    In the record content the elevation comes before the measure:
    x, y, z, m.  Unlike m, there is no nodata value for z.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    m: float = NODATA

    shapeType = POINTZ
    size = _Struct_4d.size

    @classmethod
    def from_byte_stream(cls, b_io: ReadableBinStream) -> PointZ:
        x, y = Point._x_y_from_byte_stream(b_io, cls)
        (z,) = _Struct_1d.unpack(_read_exactly(b_io, _Struct_1d.size, cls, Point.size))
        (m,) = _Struct_1d.unpack(_read_exactly(b_io, _Struct_1d.size, cls, Point.size + 8))
        return cls(x, y, z, m)

    def write_to_byte_stream(self, b_io: WriteableBinStream) -> int:
        try:
            record = _Struct_4d.pack(self.x, self.y, self.z, self.m)
        except error:
            raise ShapefileException(
                f"Failed to write elevation point {self!r}. Expected floats."
            )
        return b_io.write(record)

    @property
    def bbox(self) -> BoundingBox:
        return BoundingBox(self.x, self.y, self.x, self.y)

    @property
    def zbox(self) -> ZBox:
        return self.z, self.z

    @property
    def mbox(self) -> MBox:
        return _mbox_from_m(self.m)

    @property
    def shapeTypeName(self) -> str:
        return SHAPETYPE_LOOKUP[self.shapeType]

    @property
    def __geo_interface__(self) -> GeoJSONPoint:
        m = None if is_no_data(self.m) else self.m
        return point_geo_interface(self, (self.x, self.y, self.z, m))


PointShape = Union[Point, PointM, PointZ]

SHAPE_CLASS_FROM_SHAPETYPE: dict[int, type[ReadableShape[PointShape]]] = {
    POINT: Point,
    POINTZ: PointZ,
    POINTM: PointM,
}
