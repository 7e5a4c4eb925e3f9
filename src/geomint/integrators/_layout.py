########################################################################################
##
##                        FLAT LAYOUT OF THE STAGE UNKNOWNS
##                            (integrators/_layout.py)
##
########################################################################################

# IMPORTS ==============================================================================

import numpy as np

from ..errors import DimensionMismatch


# LAYOUTS ==============================================================================

class StageLayout:
    """Layout of 's' stage vectors of dimension 'd' followed by 'extra'
    single vectors in one flat unknown vector.

    Component 'k' of stage 'i' sits at index 'd*i + k', component 'k' of
    extra block 'e' at index 'd*(s + e) + k'.

    Parameters
    ----------
    d : int
        dimension of the stage vectors
    s : int
        number of stages
    extra : int
        number of additional blocks of length 'd'

    Attributes
    ----------
    size : int
        length of the flat vector
    """

    def __init__(self, d, s, extra=0):
        self.d = d
        self.s = s
        self.extra = extra
        self.size = d * (s + extra)


    def __len__(self):
        return self.size


    def __repr__(self):
        return f"StageLayout(d={self.d}, s={self.s}, extra={self.extra})"


    def check(self, x):
        """Raise 'DimensionMismatch' if 'x' does not fit the layout"""
        if np.ndim(x) != 1 or len(x) != self.size:
            raise DimensionMismatch(
                f"unknown vector of shape {np.shape(x)} does not match layout of size {self.size}"
                )


    def unpack(self, x, X, *blocks):
        """Copy the flat vector 'x' into the stage array 'X' of shape
        (s, d) and the extra 'blocks' of length d"""

        self.check(x)

        if len(blocks) != self.extra:
            raise DimensionMismatch(f"layout has {self.extra} extra blocks, got {len(blocks)}")

        n = self.d * self.s
        X[...] = x[:n].reshape(self.s, self.d)

        for block in blocks:
            block[...] = x[n:n+self.d]
            n += self.d


    def pack(self, X, *blocks):
        """Flat vector from the stage array 'X' and the extra 'blocks'"""

        if np.shape(X) != (self.s, self.d):
            raise DimensionMismatch(f"stage array of shape {np.shape(X)}, expected {(self.s, self.d)}")

        if len(blocks) != self.extra:
            raise DimensionMismatch(f"layout has {self.extra} extra blocks, got {len(blocks)}")

        x = np.empty(self.size, dtype=np.result_type(X, *blocks))

        n = self.d * self.s
        x[:n] = np.ravel(X)

        for block in blocks:
            x[n:n+self.d] = block
            n += self.d

        return x


class ParkLayout:
    """Layout of the stage unknowns of projected additive Runge-Kutta
    methods.

    Internal stage 'i' stores the pair (Y, Z) interleaved per component,
    'Y[i,k]' at '2*(d*i + k)' and 'Z[i,k]' right after it. The projective
    stages follow with the triple (Y, Z, Lambda), 'Y[i,k]' at
    '2*d*s + 3*(d*i + k)' followed by 'Z[i,k]' and 'Lambda[i,k]'.

    Parameters
    ----------
    d : int
        dimension of the state
    s : int
        number of internal stages
    r : int
        number of projective stages

    Attributes
    ----------
    size : int
        length of the flat vector
    """

    def __init__(self, d, s, r):
        self.d = d
        self.s = s
        self.r = r

        #length of the internal block
        self.internal = 2 * d * s
        self.size = self.internal + 3 * d * r


    def __len__(self):
        return self.size


    def __repr__(self):
        return f"ParkLayout(d={self.d}, s={self.s}, r={self.r})"


    def check(self, x):
        """Raise 'DimensionMismatch' if 'x' does not fit the layout"""
        if np.ndim(x) != 1 or len(x) != self.size:
            raise DimensionMismatch(
                f"unknown vector of shape {np.shape(x)} does not match layout of size {self.size}"
                )


    def unpack(self, x, Y, Z, Y_tilde, Z_tilde, Lambda):
        """Copy the flat vector into the internal stages 'Y', 'Z' of shape
        (s, d) and the projective stages 'Y_tilde', 'Z_tilde', 'Lambda'
        of shape (r, d)"""

        self.check(x)

        internal = x[:self.internal].reshape(self.s, self.d, 2)
        Y[...] = internal[..., 0]
        Z[...] = internal[..., 1]

        projective = x[self.internal:].reshape(self.r, self.d, 3)
        Y_tilde[...] = projective[..., 0]
        Z_tilde[...] = projective[..., 1]
        Lambda[...] = projective[..., 2]


    def pack(self, Y, Z, Y_tilde, Z_tilde, Lambda):
        """Flat vector from internal and projective stage arrays"""

        for name, value, shape in [
            ("Y", Y, (self.s, self.d)),
            ("Z", Z, (self.s, self.d)),
            ("Y_tilde", Y_tilde, (self.r, self.d)),
            ("Z_tilde", Z_tilde, (self.r, self.d)),
            ("Lambda", Lambda, (self.r, self.d))
            ]:
            if np.shape(value) != shape:
                raise DimensionMismatch(f"'{name}' has shape {np.shape(value)}, expected {shape}")

        x = np.empty(self.size, dtype=np.result_type(Y, Z, Y_tilde, Z_tilde, Lambda))

        x[:self.internal] = np.stack((Y, Z), axis=-1).ravel()
        x[self.internal:] = np.stack((Y_tilde, Z_tilde, Lambda), axis=-1).ravel()

        return x
