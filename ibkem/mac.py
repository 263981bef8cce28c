#!/usr/bin/env python3

"""Affine message authentication code over the scalar field.

The tag of a message `m` under secret key `(B, X_0..X_l, X'_0..X'_l')` is

    T = B s,    U = sum_i f_i(m) X_i T + sum_i f'_i X'_i

for fresh randomness `s`, published in G2 as `([T]_2, [U]_2)`.
"""

from petrelic.multiplicative.pairing import G2

from ibkem.groups import GroupContext,ZERO,random_matrix,random_vector
from ibkem.encoding import active_terms,active_prime_terms,encoded_bits
from ibkem import linalg

class MACSecretKey:
    """Secret key of the affine MAC.

    Attributes
    ----------
    B : k x k matrix of Bn
    X : list of `l+1` matrices of Bn, each 2k x k
    X_prime : list of `l'+1` vectors of Bn, each of length 2k
    """
    def __init__(self, B, X, X_prime):
        self.B = B
        self.X = X
        self.X_prime = X_prime

class Tag:
    """MAC tag.

    Attributes
    ----------
    t_g2 : list of k elements of G2
        `[T]_2`
    u_g2 : list of 2k elements of G2
        `[U]_2`
    t_field : list of k Bn
        `T` itself; only kept by the tagging party (key extraction needs it)
    """
    def __init__(self, t_g2, u_g2, t_field):
        self.t_g2 = t_g2
        self.u_g2 = u_g2
        self.t_field = t_field

class AffineMAC:
    """Affine MAC with parameters `(k, l, l')`.

    Parameters
    ----------
    k : int
        dimension of the randomness `s` and of `T`
    l : int
        highest index of the identity encoding (`X` has `l+1` entries)
    l_prime : int (optional)
        highest constant-term index (`X'` has `l'+1` entries)
    group : GroupContext (optional)
        shared group constants
    """

    def __init__(self, k, l, l_prime=0, group=None):
        if k < 1:
            raise ValueError("k must be positive, got {}".format(k))
        if l < 0 or l_prime < 0:
            raise ValueError("l and l' must be non-negative")
        self.k = k
        self.l = l
        self.l_prime = l_prime
        self.group = GroupContext() if group is None else group

    def check_message(self, message):
        """Reject messages shorter than the number of bits the encoding reads."""
        if 8 * len(message) < encoded_bits(self.l):
            raise ValueError("message has {} bits, encoding with l={} needs {}".format(
                8 * len(message), self.l, encoded_bits(self.l)))

    def check_key(self, sk):
        linalg.check_dimension("MAC key X count", len(sk.X), self.l + 1)
        linalg.check_dimension("MAC key X' count", len(sk.X_prime), self.l_prime + 1)

    def gen_mac(self):
        """Sample a fresh secret key.

        Returns
        -------
        MACSecretKey
        """
        B = random_matrix(self.k, self.k)
        X = [random_matrix(2 * self.k, self.k) for _ in range(self.l + 1)]
        X_prime = [random_vector(2 * self.k) for _ in range(self.l_prime + 1)]
        return MACSecretKey(B, X, X_prime)

    def tag(self, sk, message):
        """Tag `message` under `sk`.

        Parameters
        ----------
        sk : MACSecretKey
        message : bytes

        Returns
        -------
        Tag
        """
        self.check_message(message)
        self.check_key(sk)
        s = random_vector(self.k)
        t_field = linalg.matrix_vector_mul(sk.B, s)

        u_field = [ZERO] * (2 * self.k)
        for i, fi in active_terms(self.l, message):
            xi_t = linalg.matrix_vector_mul(sk.X[i], t_field)
            u_field = linalg.vector_add(u_field, linalg.vector_scale(fi, xi_t))
        for i, fi_prime in active_prime_terms(self.l_prime):
            u_field = linalg.vector_add(u_field, linalg.vector_scale(fi_prime, sk.X_prime[i]))

        return Tag(self.group.vector_lift_g2(t_field),
                   self.group.vector_lift_g2(u_field),
                   t_field)

    def verify(self, sk, message, tag):
        """Check a tag against `message`.

        `[U]_2` is recomputed from `[T]_2` directly in G2, so the verifier
        never needs `T` in the field.

        Returns
        -------
        bool
            `True` iff every coordinate of the recomputed `[U]_2` equals the tag's
        """
        self.check_message(message)
        self.check_key(sk)
        linalg.check_dimension("tag T", len(tag.t_g2), self.k)
        linalg.check_dimension("tag U", len(tag.u_g2), 2 * self.k)

        expected = [G2.neutral_element()] * (2 * self.k)
        for i, fi in active_terms(self.l, message):
            xi = [linalg.vector_scale(fi, row) for row in sk.X[i]]
            expected = linalg.group_vector_mul(
                expected, linalg.matrix_group_vector_mul(xi, tag.t_g2, G2))
        for i, fi_prime in active_prime_terms(self.l_prime):
            x_prime = linalg.vector_scale(fi_prime, sk.X_prime[i])
            expected = linalg.group_vector_mul(expected, self.group.vector_lift_g2(x_prime))

        return all(e == u for e, u in zip(expected, tag.u_g2))
