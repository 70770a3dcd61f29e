from spheretrace.core.matrix import (
    DimensionMismatchError, Matrix, MatrixError, NonSquareMatrixError, SingularMatrixError
)
from spheretrace.core.ray import Ray
from spheretrace.core.vector import EPSILON, Vector, equal
from spheretrace.geometry.sphere import Sphere

__version__ = "0.1.0"
