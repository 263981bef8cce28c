#!/usr/bin/env python3

"""Objects to represent IBKEM keys and ciphertexts.

The passively secure scheme uses `PublicKey` and `Ciphertext`; the scheme
with QANIZK-bound ciphertexts uses `CCAPublicKey` (which carries a CRS) and
`CCACiphertext` (which carries a proof).
"""

def _size(elements):
    return sum(len(x.to_binary()) for x in elements)

def _flatten(matrices):
    return [x for m in matrices for row in m for x in row]

class PublicKey:
    """IBKEM master public key.

    Attributes
    ----------
    m_g1 : 3k x k matrix in G1
        `[M]_1`
    z_g1 : list of `l+1` k x k matrices in G1
        `[Z_i]_1 = [(Y_i^T || X_i^T) M]_1`
    z_prime_g1 : list of `l'+1` vectors of k elements of G1
        `[z'_i]_1 = [M^T (y'_i || x'_i)]_1`
    """
    def __init__(self, m_g1, z_g1, z_prime_g1):
        self.m_g1 = m_g1
        self.z_g1 = z_g1
        self.z_prime_g1 = z_prime_g1

    def get_size(self):
        """Calculate the size (in bytes) of the public key."""
        return _size(_flatten([self.m_g1] + self.z_g1)) + _size(_flatten([self.z_prime_g1]))

class CCAPublicKey(PublicKey):
    """Master public key that also carries the QANIZK CRS for `[M]_1`."""
    def __init__(self, m_g1, z_g1, z_prime_g1, crs):
        PublicKey.__init__(self, m_g1, z_g1, z_prime_g1)
        self.crs = crs

    def get_size(self):
        return PublicKey.get_size(self) + self.crs.get_size()

class SecretKey:
    """IBKEM master secret key.

    Attributes
    ----------
    mac_sk : MACSecretKey
    Y : list of `l+1` k x k matrices of Bn
    Y_prime : list of `l'+1` vectors of k Bn
    """
    def __init__(self, mac_sk, Y, Y_prime):
        self.mac_sk = mac_sk
        self.Y = Y
        self.Y_prime = Y_prime

class UserSecretKey:
    """Secret key of one identity: a MAC tag `([t]_2, [u]_2)` and `[v]_2`."""
    def __init__(self, t_g2, u_g2, v_g2):
        self.t_g2 = t_g2
        self.u_g2 = u_g2
        self.v_g2 = v_g2

    def get_size(self):
        return _size(self.t_g2 + self.u_g2 + self.v_g2)

class Ciphertext:
    """IBKEM ciphertext.

    Parameters
    ----------
    c0_g1 : list of 3k elements of G1
        `[M r]_1`
    c1_g1 : list of k elements of G1
        `[sum_i f_i Z_i r]_1`
    """
    def __init__(self, c0_g1, c1_g1):
        self.c0_g1 = c0_g1
        self.c1_g1 = c1_g1

    def get_size(self):
        """Calculate the size (in bytes) of the ciphertext."""
        return _size(self.c0_g1 + self.c1_g1)

class CCACiphertext(Ciphertext):
    """Ciphertext whose `c0` is bound to the recipient identity by a QANIZK proof."""
    def __init__(self, c0_g1, c1_g1, proof):
        Ciphertext.__init__(self, c0_g1, c1_g1)
        self.proof = proof

    def get_size(self):
        return Ciphertext.get_size(self) + self.proof.get_size()
