class ShapefileException(Exception):
    """An exception to handle shapefile specific problems."""


class ShapeRecordReadError(ShapefileException, OSError):
    """A shape record ended before all of its fields could be read."""
