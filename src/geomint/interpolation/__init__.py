from .hermite import HermiteInterpolation
