from __future__ import annotations


class MarkerError(ValueError):
    """A byte sequence could not be turned into a Marker."""


class TooFewMarkerBytesError(MarkerError):
    def __init__(self):
        super().__init__("Too few bytes to be a valid marker.")


class TooManyMarkerBytesError(MarkerError):
    def __init__(self):
        super().__init__("Too many bytes to be a valid marker.")


class UnknownMarkerError(MarkerError):
    def __init__(self, first: int, second: int):
        super().__init__(f"{first:02x} {second:02x} is not a valid marker.")
        self.first = first
        self.second = second


class SegmentError(ValueError):
    """A single segment could not be read from the start of a buffer."""


class TooFewSegmentBytesError(SegmentError):
    def __init__(self, available: int):
        if available == 0:
            msg = "Attempted to read segment from an empty byte slice."
        else:
            msg = f"Attempted to read segment from a slice containing only {available} bytes."
        super().__init__(msg)
        self.available = available


class InvalidMarkerError(SegmentError):
    def __init__(self, cause: MarkerError):
        super().__init__("Segment began with an invalid marker.")
        self.cause = cause


class NoLengthBytesError(SegmentError):
    def __init__(self):
        super().__init__(
            "Marker requires length bytes, but have fewer than two bytes left in the input."
        )


class LengthLessThanTwoError(SegmentError):
    def __init__(self, length: int):
        super().__init__(
            f"Length of segment, {length}, was less than two. "
            "This doesn't even cover the two length bytes!"
        )
        self.length = length


class TooFewDataBytesError(SegmentError):
    def __init__(self, expected: int, actual: int):
        super().__init__(
            f"Segment wants {expected} data bytes, "
            f"but there are only {actual} bytes remaining in the slice."
        )
        self.expected = expected
        self.actual = actual


class StreamError(ValueError):
    """Parsing a whole buffer stopped at the first bad segment."""

    def __init__(self, bytes_parsed: int, segments_parsed: int, cause: SegmentError):
        super().__init__(
            f"After successfully parsing {bytes_parsed} bytes into "
            f"{segments_parsed} segments, got error: {cause}"
        )
        self.bytes_parsed = bytes_parsed
        self.segments_parsed = segments_parsed
        self.cause = cause

    def describe(self) -> str:
        """Message followed by every chained cause, innermost last."""
        lines = [str(self)]
        err = self.cause
        while err is not None:
            lines.append(f"  caused by: {err}")
            err = getattr(err, "cause", None)
        return "\n".join(lines)
