#!/usr/bin/env python3

"""Tag-based quasi-adaptive NIZK proof that a G1 vector lies in the span of `[M]_1`.

For a public matrix `[M]_1` (n x k) the prover shows `[c0]_1 = [M r]_1` for a
witness `r`, bound to a caller-chosen tag. The tag, `c0` and the prover's
commitment `[t]_1` are hashed to a bit string `tau` of length `lam`; `tau`
selects one of two CRS matrices for every bit position.

Notes
-----
Verification checks, for every column of `A`,

    e([u]_1, [A]_2) = e([c0]_1, [KA]_2) * e([t]_1, [K_tau A]_2)

All `k` column equations are folded into a single product of pairings with
weights hashed from the tag, the statement and the proof, so one
multi-pairing decides the whole proof and the verdict is deterministic.
"""

import logging

from petrelic.multiplicative.pairing import G1,G2

from ibkem.groups import GroupContext,ORDER,random_matrix,random_vector,gt_identity
from ibkem.utils import hash_to_bits,hash_to_field,serialize_points
from ibkem import linalg

logger = logging.getLogger(__name__)

WEIGHT_DOMAIN = b"QANIZK-VERIFY"

class CRS:
    """Common reference string for one matrix `[M]_1`.

    Attributes
    ----------
    a_g2 : (k+1) x k matrix in G2
        `[A]_2`
    ka_g2 : n x k matrix in G2
        `[K A]_2`
    b_g1 : k x k matrix in G1
        `[B]_1`
    mk_g1 : k x (k+1) matrix in G1
        `[M^T K]_1`
    kjb_a_g2 : list of `lam` pairs of k x k matrices in G2
        `[K_{j,b} A]_2` for b in {0, 1}
    bt_kjb_g1 : list of `lam` pairs of k x (k+1) matrices in G1
        `[B^T K_{j,b}]_1` for b in {0, 1}
    """
    def __init__(self, a_g2, ka_g2, b_g1, mk_g1, kjb_a_g2, bt_kjb_g1):
        self.a_g2 = a_g2
        self.ka_g2 = ka_g2
        self.b_g1 = b_g1
        self.mk_g1 = mk_g1
        self.kjb_a_g2 = kjb_a_g2
        self.bt_kjb_g1 = bt_kjb_g1

    @property
    def lam(self):
        return len(self.kjb_a_g2)

    def get_size(self):
        """Size in bytes of the CRS group elements."""
        elements = [x for row in self.a_g2 + self.ka_g2 + self.b_g1 + self.mk_g1 for x in row]
        for pair in self.kjb_a_g2 + self.bt_kjb_g1:
            for m in pair:
                elements += [x for row in m for x in row]
        return sum(len(x.to_binary()) for x in elements)

class Trapdoor:
    """Secret `K` behind a CRS; only the CRS generator holds it."""
    def __init__(self, k_matrix):
        self.k_matrix = k_matrix

class Proof:
    """QANIZK proof: commitment `[t]_1` (length k) and response `[u]_1` (length k+1)."""
    def __init__(self, t1_g1, u1_g1):
        self.t1_g1 = t1_g1
        self.u1_g1 = u1_g1

    def get_size(self):
        return sum(len(x.to_binary()) for x in self.t1_g1 + self.u1_g1)

class QANIZK:
    """QANIZK for linear subspaces of G1 with `k`-column matrices.

    Parameters
    ----------
    k : int
        column count of the language matrix
    lam : int (optional)
        number of tag bits, i.e. the number of CRS matrix pairs
    group : GroupContext (optional)
        shared group constants
    """

    def __init__(self, k, lam=128, group=None):
        if k < 1:
            raise ValueError("k must be positive, got {}".format(k))
        if lam < 1:
            raise ValueError("lam must be positive, got {}".format(lam))
        self.k = k
        self.lam = lam
        self.group = GroupContext() if group is None else group

    def gen_crs(self, m_g1):
        """Generate a CRS and its trapdoor for the language matrix `[M]_1`.

        Parameters
        ----------
        m_g1 : n x k matrix in G1

        Returns
        -------
        crs : CRS
        trapdoor : Trapdoor
        """
        n, cols = linalg.shape(m_g1)
        linalg.check_dimension("language matrix columns", cols, self.k)

        A = random_matrix(self.k + 1, self.k)
        B = random_matrix(self.k, self.k)
        K = random_matrix(n, self.k + 1)

        a_g2 = self.group.matrix_lift_g2(A)
        ka_g2 = self.group.matrix_lift_g2(linalg.matrix_multiply(K, A))
        b_g1 = self.group.matrix_lift_g1(B)
        mk_g1 = linalg.group_matrix_field_mul(linalg.matrix_transpose(m_g1), K, G1)

        B_t = linalg.matrix_transpose(B)
        kjb_a_g2 = []
        bt_kjb_g1 = []
        for _ in range(self.lam):
            pair_a = []
            pair_b = []
            for _ in range(2):
                K_jb = random_matrix(self.k, self.k + 1)
                pair_a.append(self.group.matrix_lift_g2(linalg.matrix_multiply(K_jb, A)))
                pair_b.append(self.group.matrix_lift_g1(linalg.matrix_multiply(B_t, K_jb)))
            kjb_a_g2.append(pair_a)
            bt_kjb_g1.append(pair_b)

        logger.debug("generated QANIZK CRS: n=%d, k=%d, lam=%d", n, self.k, self.lam)
        return CRS(a_g2, ka_g2, b_g1, mk_g1, kjb_a_g2, bt_kjb_g1), Trapdoor(K)

    def derive_tau(self, tag, c0_g1, t1_g1):
        """Hash `tag || c0 || t1` to `lam` selector bits."""
        return hash_to_bits(bytes(tag) + serialize_points(c0_g1) + serialize_points(t1_g1), self.lam)

    def derive_weights(self, tag, c0_g1, proof):
        """Hash `tag || c0 || t1 || u1` to `k` scalars folding the verification equations."""
        data = bytes(tag) + serialize_points(c0_g1) + serialize_points(proof.t1_g1) + serialize_points(proof.u1_g1)
        return [hash_to_field(data + j.to_bytes(4, "little"), WEIGHT_DOMAIN) for j in range(self.k)]

    def check_crs(self, crs):
        linalg.check_dimension("CRS tag bits", crs.lam, self.lam)
        linalg.check_dimension("CRS [A] rows", len(crs.a_g2), self.k + 1)

    def prove(self, crs, tag, c0_g1, r):
        """Prove `[c0]_1 = [M r]_1` under `tag`.

        Parameters
        ----------
        crs : CRS
        tag : bytes
        c0_g1 : list of n elements of G1
        r : list of k Bn
            witness

        Returns
        -------
        Proof
        """
        self.check_crs(crs)
        linalg.check_dimension("c0", len(c0_g1), len(crs.ka_g2))
        linalg.check_dimension("witness", len(r), self.k)

        s = random_vector(self.k)
        t1_g1 = linalg.group_matrix_vector_mul(crs.b_g1, s, G1)
        tau = self.derive_tau(tag, c0_g1, t1_g1)

        bt_k_tau = linalg.group_matrix_sum([crs.bt_kjb_g1[j][b] for j, b in enumerate(tau)])
        u1_g1 = linalg.group_vector_mul(
            linalg.vector_group_matrix_mul(r, crs.mk_g1, G1),
            linalg.vector_group_matrix_mul(s, bt_k_tau, G1))
        return Proof(t1_g1, u1_g1)

    def verify(self, crs, tag, c0_g1, proof):
        """Verify a proof for `[c0]_1` under `tag`.

        Returns
        -------
        bool
            `True` iff the pairing product equation holds
        """
        self.check_crs(crs)
        linalg.check_dimension("c0", len(c0_g1), len(crs.ka_g2))
        linalg.check_dimension("proof t1", len(proof.t1_g1), self.k)
        linalg.check_dimension("proof u1", len(proof.u1_g1), self.k + 1)

        tau = self.derive_tau(tag, c0_g1, proof.t1_g1)
        k_tau_a = linalg.group_matrix_sum([crs.kjb_a_g2[j][b] for j, b in enumerate(tau)])

        # the right-hand side is folded in with negated weights so the product must vanish
        rho = self.derive_weights(tag, c0_g1, proof)
        neg_rho = [(ORDER - x) % ORDER for x in rho]
        a_rho = linalg.group_matrix_vector_mul(crs.a_g2, rho, G2)
        ka_rho = linalg.group_matrix_vector_mul(crs.ka_g2, neg_rho, G2)
        k_tau_a_rho = linalg.group_matrix_vector_mul(k_tau_a, neg_rho, G2)

        pairs = list(zip(proof.u1_g1, a_rho))
        pairs += list(zip(c0_g1, ka_rho))
        pairs += list(zip(proof.t1_g1, k_tau_a_rho))
        return self.group.multi_pairing(pairs) == gt_identity()
