#!/usr/bin/env python3

"""Bilinear group context over BLS12-381 and random sampling of scalars.

All group arithmetic goes through petrelic's multiplicative interface, so
the "sum" of two group elements is written as their product and scalar
multiplication as exponentiation.
"""

from petrelic.multiplicative.pairing import G1,G2,GT
from petrelic.bn import Bn

ORDER = G1.order()
ZERO = Bn(0)
ONE = Bn(1)

class GroupContext:
    """Fixed generators of an asymmetric pairing group.

    Attributes
    ----------
    g1 : element of G1
        generator of G1
    g2 : element of G2
        generator of G2
    gt : element of GT
        `e(g1, g2)`
    order : Bn
        order of the three groups (the scalar field modulus)
    """

    def __init__(self, g1=None, g2=None):
        """Build the context; `None` generators fall back to the standard ones."""
        self.g1 = G1.generator() if g1 is None else g1
        self.g2 = G2.generator() if g2 is None else g2
        self.gt = self.g1.pair(self.g2)
        self.order = ORDER

    def lift_g1(self, s):
        """Map a scalar `s` to `g1**s`."""
        return self.g1 ** s

    def lift_g2(self, s):
        """Map a scalar `s` to `g2**s`."""
        return self.g2 ** s

    def lift_gt(self, s):
        """Map a scalar `s` to `e(g1,g2)**s`."""
        return self.gt ** s

    def vector_lift_g1(self, v):
        return [self.lift_g1(s) for s in v]

    def vector_lift_g2(self, v):
        return [self.lift_g2(s) for s in v]

    def matrix_lift_g1(self, m):
        return [self.vector_lift_g1(row) for row in m]

    def matrix_lift_g2(self, m):
        return [self.vector_lift_g2(row) for row in m]

    def pairing(self, a, b):
        """Evaluate `e(a, b)` for `a` in G1 and `b` in G2."""
        return a.pair(b)

    def multi_pairing(self, pairs):
        """Product of pairings over a sequence of `(G1, G2)` pairs.

        Parameters
        ----------
        pairs : iterable of (element of G1, element of G2)

        Returns
        -------
        element of GT
            `prod e(a_i, b_i)`; GT's identity for an empty sequence
        """
        result = GT.neutral_element()
        for a, b in pairs:
            result = result * a.pair(b)
        return result

def gt_identity():
    return GT.neutral_element()

def random_field_element():
    """Uniformly random scalar in `[0, ORDER)`."""
    return ORDER.random()

def random_vector(n):
    return [random_field_element() for _ in range(n)]

def random_matrix(rows, cols):
    return [random_vector(cols) for _ in range(rows)]
