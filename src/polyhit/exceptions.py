"""Exception hierarchy for Polyhit."""


class PolyhitError(Exception):
    """Base exception for all Polyhit errors."""

    pass


class GeometryError(PolyhitError):
    """Errors in geometric queries."""

    pass


class ContourError(GeometryError):
    """A required contour reference was missing or unusable."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ScaleError(GeometryError):
    """A non-positive scale was supplied where a zoom factor is required."""

    def __init__(self, scale: float) -> None:
        self.scale = scale
        super().__init__(f"Scale must be greater than zero, got {scale!r}")


class ShapeError(PolyhitError):
    """Shape data that does not describe a group, polygon or contour."""

    def __init__(self, kind: object) -> None:
        self.kind = kind
        super().__init__(f"Unknown shape kind: {kind!r}")


class SceneError(PolyhitError):
    """Errors related to reading scene files."""

    pass


class SceneLoadError(SceneError):
    """Error loading a scene file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load scene '{path}': {reason}")
