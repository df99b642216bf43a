class MeshingError(Exception):
    """Base class for everything an extraction pass can raise."""


class ConfigurationError(MeshingError, ValueError):
    """The grid region, cell size or normal step cannot be walked."""


class FieldEvaluationError(MeshingError, ArithmeticError):
    """The scalar field raised or returned a non-finite value."""

    def __init__(self, message, point=None):
        super().__init__(message)
        self.point = point
