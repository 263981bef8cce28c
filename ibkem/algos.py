#!/usr/bin/env python3

"""Implementation of the IBKEM algorithms (Setup, Extract, Enc, Dec).

`IBKEM1` compiles the affine MAC into an identity-based KEM. `IBKEM2` runs
the same algebra and additionally binds every ciphertext to its recipient
identity with a QANIZK proof that `c0` lies in the span of `[M]_1`.
"""

import logging

from petrelic.multiplicative.pairing import G1

from ibkem.groups import GroupContext,ZERO,ONE,random_matrix,random_vector
from ibkem.encoding import active_terms,active_prime_terms
from ibkem.mac import AffineMAC
from ibkem.qanizk import QANIZK
from ibkem.objects import PublicKey,CCAPublicKey,SecretKey,UserSecretKey,Ciphertext,CCACiphertext
from ibkem.utils import serialize_points
from ibkem import linalg

logger = logging.getLogger(__name__)

class IBKEM1:
    """Passively secure IBKEM with parameters `(k, l, l')`.

    Parameters
    ----------
    k : int
        matrix dimension; `M` is `3k x k`
    l : int
        highest identity-encoding index (use `encoding.domain_size(bits)`)
    l_prime : int (optional)
        highest constant-term index
    group : GroupContext (optional)
        shared group constants
    """

    def __init__(self, k, l, l_prime=0, group=None):
        self.group = GroupContext() if group is None else group
        self.mac = AffineMAC(k, l, l_prime, group=self.group)
        self.k = k
        self.eta = 2 * k
        self.l = l
        self.l_prime = l_prime

    def _setup_keys(self):
        """Sample `M`, the MAC key and `Y_i`, `y'_i`; returns `([M]_1, [Z_i]_1, [z'_i]_1, sk)`."""
        logger.debug("IBKEM setup: k=%d, eta=%d, l=%d, l'=%d", self.k, self.eta, self.l, self.l_prime)
        M = random_matrix(self.k + self.eta, self.k)
        mac_sk = self.mac.gen_mac()

        Y = []
        z_g1 = []
        for i in range(self.l + 1):
            y_i = random_matrix(self.k, self.k)
            combined = linalg.matrix_concat(linalg.matrix_transpose(y_i),
                                            linalg.matrix_transpose(mac_sk.X[i]))
            Y.append(y_i)
            z_g1.append(self.group.matrix_lift_g1(linalg.matrix_multiply(combined, M)))

        Y_prime = []
        z_prime_g1 = []
        for i in range(self.l_prime + 1):
            y_prime_i = random_vector(self.k)
            combined = linalg.vector_concat(y_prime_i, mac_sk.X_prime[i])
            Y_prime.append(y_prime_i)
            z_prime_g1.append(self.group.vector_lift_g1(linalg.matrix_transpose_vector_mul(M, combined)))

        return self.group.matrix_lift_g1(M), z_g1, z_prime_g1, SecretKey(mac_sk, Y, Y_prime)

    def setup(self):
        """Generate a master key pair.

        Returns
        -------
        pk : PublicKey
        sk : SecretKey
        """
        m_g1, z_g1, z_prime_g1, sk = self._setup_keys()
        return PublicKey(m_g1, z_g1, z_prime_g1), sk

    def extract(self, sk, identity):
        """Derive the secret key of `identity`.

        Every call tags the identity with fresh randomness, so two keys for the
        same identity differ but both decrypt.

        Parameters
        ----------
        sk : SecretKey
            master secret key
        identity : bytes
            identity bit string

        Returns
        -------
        UserSecretKey
        """
        linalg.check_dimension("secret key Y count", len(sk.Y), self.l + 1)
        linalg.check_dimension("secret key Y' count", len(sk.Y_prime), self.l_prime + 1)
        tag = self.mac.tag(sk.mac_sk, identity)

        v_field = [ZERO] * self.k
        for i, fi in active_terms(self.l, identity):
            yi_t = linalg.matrix_vector_mul(sk.Y[i], tag.t_field)
            v_field = linalg.vector_add(v_field, linalg.vector_scale(fi, yi_t))
        for i, fi_prime in active_prime_terms(self.l_prime):
            v_field = linalg.vector_add(v_field, linalg.vector_scale(fi_prime, sk.Y_prime[i]))

        return UserSecretKey(tag.t_g2, tag.u_g2, self.group.vector_lift_g2(v_field))

    def _encapsulate(self, pk, identity):
        """Shared encryption algebra; also returns the randomness `r`."""
        self.mac.check_message(identity)
        linalg.check_dimension("public key Z count", len(pk.z_g1), self.l + 1)
        linalg.check_dimension("public key z' count", len(pk.z_prime_g1), self.l_prime + 1)
        r = random_vector(self.k)
        c0_g1 = linalg.group_matrix_vector_mul(pk.m_g1, r, G1)

        z_sum = None
        for i, fi in active_terms(self.l, identity):
            term = pk.z_g1[i] if fi == ONE else linalg.group_matrix_pow(pk.z_g1[i], fi)
            z_sum = term if z_sum is None else linalg.group_matrix_mul(z_sum, term)
        if z_sum is None:
            z_sum = [[G1.neutral_element()] * self.k for _ in range(len(pk.z_g1[0]))]
        c1_g1 = linalg.group_matrix_vector_mul(z_sum, r, G1)

        pairs = []
        for i, fi_prime in active_prime_terms(self.l_prime):
            zi_prime_r = G1.wprod(r, pk.z_prime_g1[i])
            pairs.append((zi_prime_r ** fi_prime, self.group.g2))
        key = self.group.multi_pairing(pairs)
        return c0_g1, c1_g1, key, r

    def encrypt(self, pk, identity):
        """Encapsulate a fresh key to `identity`.

        Returns
        -------
        ct : Ciphertext
        key : element of GT
        """
        c0_g1, c1_g1, key, _ = self._encapsulate(pk, identity)
        return Ciphertext(c0_g1, c1_g1), key

    def _decapsulate(self, usk, ciphertext):
        if len(ciphertext.c0_g1) == 0 or len(ciphertext.c1_g1) == 0:
            return None
        w_g2 = usk.v_g2 + usk.u_g2
        linalg.check_dimension("c0 against [v || u]", len(ciphertext.c0_g1), len(w_g2))
        linalg.check_dimension("c1 against [t]", len(ciphertext.c1_g1), len(usk.t_g2))

        result1 = self.group.multi_pairing(zip(ciphertext.c0_g1, w_g2))
        result2 = self.group.multi_pairing(zip(ciphertext.c1_g1, usk.t_g2))
        return result1 * result2 ** (-1)

    def decrypt(self, usk, ciphertext):
        """Recover the encapsulated key.

        A key for a different identity yields an unrelated GT element rather
        than an error.

        Returns
        -------
        element of GT or None
            `None` for an empty ciphertext
        """
        return self._decapsulate(usk, ciphertext)

class IBKEM2(IBKEM1):
    """IBKEM whose ciphertexts carry a QANIZK proof bound to the recipient identity.

    Parameters
    ----------
    k, l, l_prime, group
        as for `IBKEM1`
    lam : int (optional)
        number of QANIZK tag bits
    """

    def __init__(self, k, l, l_prime=0, lam=128, group=None):
        IBKEM1.__init__(self, k, l, l_prime, group=group)
        self.qanizk = QANIZK(k, lam, group=self.group)
        self.lam = lam

    def setup(self):
        """Generate a master key pair and the CRS for `[M]_1`.

        The QANIZK trapdoor is discarded here and never stored in any key.

        Returns
        -------
        pk : CCAPublicKey
        sk : SecretKey
        """
        m_g1, z_g1, z_prime_g1, sk = self._setup_keys()
        crs, _ = self.qanizk.gen_crs(m_g1)
        return CCAPublicKey(m_g1, z_g1, z_prime_g1, crs), sk

    @staticmethod
    def proof_tag(identity, c0_g1):
        """QANIZK tag `identity || c0`."""
        return bytes(identity) + serialize_points(c0_g1)

    def encrypt(self, pk, identity):
        """Encapsulate a fresh key to `identity` and prove `c0` well formed.

        Returns
        -------
        ct : CCACiphertext
        key : element of GT
        """
        if not isinstance(pk, CCAPublicKey):
            raise TypeError("IBKEM2 needs a public key with a CRS")
        c0_g1, c1_g1, key, r = self._encapsulate(pk, identity)
        proof = self.qanizk.prove(pk.crs, self.proof_tag(identity, c0_g1), c0_g1, r)
        return CCACiphertext(c0_g1, c1_g1, proof), key

    def decrypt(self, pk, usk, identity, ciphertext):
        """Verify the ciphertext's proof under `identity`, then decapsulate.

        Parameters
        ----------
        pk : CCAPublicKey
        usk : UserSecretKey
        identity : bytes
            recipient identity as known to the caller
        ciphertext : CCACiphertext

        Returns
        -------
        element of GT or None
            `None` if the proof does not verify for `identity`
        """
        if not isinstance(pk, CCAPublicKey):
            raise TypeError("IBKEM2 needs a public key with a CRS")
        if not isinstance(ciphertext, CCACiphertext):
            raise TypeError("IBKEM2 needs a ciphertext with a proof")
        if len(ciphertext.c0_g1) == 0 or len(ciphertext.c1_g1) == 0:
            return None
        tag = self.proof_tag(identity, ciphertext.c0_g1)
        if not self.qanizk.verify(pk.crs, tag, ciphertext.c0_g1, ciphertext.proof):
            logger.debug("QANIZK proof rejected")
            return None
        return self._decapsulate(usk, ciphertext)
