class GeometryError(Exception):
    pass


class SegmentError(GeometryError):
    pass


class SegmentIsNotCorrectError(SegmentError):
    pass


class CoordinateNumberError(SegmentIsNotCorrectError):
    pass
