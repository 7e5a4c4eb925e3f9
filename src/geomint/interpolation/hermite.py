########################################################################################
##
##                          CUBIC HERMITE INTERPOLATION
##                           (interpolation/hermite.py)
##
########################################################################################

# CLASS ================================================================================

class HermiteInterpolation:
    """Cubic Hermite interpolation between two points 'y0', 'y1' with
    derivatives 'f0', 'f1', a distance 'dx' apart.

    The position 'x' is normalised, 'x = 0' at 'y0' and 'x = 1' at 'y1'.
    Values 'x > 1' extrapolate beyond 'y1', which is what the initial
    guess of the implicit integrators uses.

    Parameters
    ----------
    dx : float
        distance between the two points (the timestep)
    """

    def __init__(self, dx):
        self.dx = dx


    def evaluate(self, y0, y1, f0, f1, x):
        """Interpolated value at the normalised position 'x'

        .. math::

            y = a_0 y_0 + a_1 y_1 + \\Delta x (b_0 f_0 + b_1 f_1)

        Parameters
        ----------
        y0, y1 : array[float]
            values at both ends
        f0, f1 : array[float]
            derivatives at both ends
        x : float
            normalised position

        Returns
        -------
        y : array[float]
        """

        a1 = 3*x**2 - 2*x**3
        a0 = 1 - a1
        b1 = x**2 * (x - 1)
        b0 = x * (1 - x) + b1

        return a0 * y0 + a1 * y1 + self.dx * (b0 * f0 + b1 * f1)


    def evaluate_derivative(self, y0, y1, f0, f1, x):
        """Derivative of the interpolant with respect to the unscaled
        coordinate at the normalised position 'x'

        Parameters
        ----------
        y0, y1 : array[float]
            values at both ends
        f0, f1 : array[float]
            derivatives at both ends
        x : float
            normalised position

        Returns
        -------
        f : array[float]
        """

        a1 = (6*x - 6*x**2) / self.dx
        b1 = x * (3*x - 2)
        b0 = 1 - 2*x + b1

        return b0 * f0 + b1 * f1 - a1 * y0 + a1 * y1
