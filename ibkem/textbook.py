#!/usr/bin/env python3

"""Three small pairing-based IBE schemes over GT messages, kept as baselines.

`BB` follows Boneh-Boyen: the identity enters the key through
`b_0 + H(id) b_1`. `BF` is the single-exponent variant where the identity
hash multiplies the key randomness directly. `LW` is a hierarchical scheme
in the style of Lewko-Waters: identities are lists of strings, the master
secret is split into one share per level, and a key can be delegated one
level down.

All three bind keys and ciphertexts to their identity and refuse to decrypt
when the identities do not match.
"""

from ibkem.groups import GroupContext,ORDER,ZERO,random_field_element,random_vector
from ibkem.utils import hash_to_field

class MasterSecretKey:
    """Master secret of the baseline schemes.

    Attributes
    ----------
    alpha : Bn
        masked secret; `e(g1,g2)**alpha` is published
    b : Bn or None
        level-binding exponent (`LW` only)
    b_0, b_1 : Bn or None
        identity exponents (`BB` and `LW`)
    """
    def __init__(self, alpha, b=None, b_0=None, b_1=None):
        self.alpha = alpha
        self.b = b
        self.b_0 = b_0
        self.b_1 = b_1

class MasterPublicKey:
    """Master public key of the baseline schemes.

    Attributes
    ----------
    a : element of GT
        `e(g1,g2)**alpha`
    b_g1, b_g2 : elements of G1, G2 or None
        `b` lifted into both source groups (`LW` only)
    b_0_g1, b_0_g2, b_1_g1, b_1_g2 : elements of G1, G2 or None
        `b_0`, `b_1` lifted into both source groups (`BB` and `LW`)
    """
    def __init__(self, a, b_g1=None, b_g2=None, b_0_g1=None, b_0_g2=None, b_1_g1=None, b_1_g2=None):
        self.a = a
        self.b_g1 = b_g1
        self.b_g2 = b_g2
        self.b_0_g1 = b_0_g1
        self.b_0_g2 = b_0_g2
        self.b_1_g1 = b_1_g1
        self.b_1_g2 = b_1_g2

class IdentityKey:
    """User key `(r, k)` in G2 for `identity`."""
    def __init__(self, identity, r, k):
        self.identity = identity
        self.r = r
        self.k = k

class IdentityCiphertext:
    """Ciphertext `(msg * a^s, g1^s, c)` for `identity`."""
    def __init__(self, identity, msg, s, c):
        self.identity = identity
        self.msg = msg
        self.s = s
        self.c = c

class HierarchicalKey:
    """`LW` user key: three lists of G2 elements, one entry per identity level."""
    def __init__(self, identity, k, k_1, k_2):
        self.identity = identity
        self.k = k
        self.k_1 = k_1
        self.k_2 = k_2

class HierarchicalCiphertext:
    """`LW` ciphertext: masked message, `g1^s` and two G1 elements per level."""
    def __init__(self, identity, msg, c, c_i, c_i_alt):
        self.identity = identity
        self.msg = msg
        self.c = c
        self.c_i = c_i
        self.c_i_alt = c_i_alt

def _unmask(ct, usk):
    # msg / (e(s, k) / e(c, r))
    mask = ct.s.pair(usk.k) * ct.c.pair(usk.r) ** (-1)
    return ct.msg * mask ** (-1)

class BB:
    """Boneh-Boyen style IBE."""

    def __init__(self, group=None):
        self.group = GroupContext() if group is None else group

    def setup(self):
        """Returns `(msk, mpk)`."""
        alpha = random_field_element()
        b_0 = random_field_element()
        b_1 = random_field_element()
        msk = MasterSecretKey(alpha, b_0=b_0, b_1=b_1)
        mpk = MasterPublicKey(self.group.lift_gt(alpha),
                              b_0_g1=self.group.lift_g1(b_0), b_0_g2=self.group.lift_g2(b_0),
                              b_1_g1=self.group.lift_g1(b_1), b_1_g2=self.group.lift_g2(b_1))
        return msk, mpk

    def keygen(self, msk, identity):
        r = random_field_element()
        xid = hash_to_field(identity)
        exponent = (msk.alpha + r * (msk.b_0 + xid * msk.b_1)) % ORDER
        return IdentityKey(identity, self.group.lift_g2(r), self.group.lift_g2(exponent))

    def encrypt(self, mpk, identity, msg):
        """Encrypt the GT element `msg` to `identity`."""
        s = random_field_element()
        xid = hash_to_field(identity)
        c = (mpk.b_0_g1 ** s) * (mpk.b_1_g1 ** ((s * xid) % ORDER))
        return IdentityCiphertext(identity, (mpk.a ** s) * msg, self.group.lift_g1(s), c)

    def decrypt(self, usk, ct):
        """Returns the message, or `None` if `usk` belongs to another identity."""
        if usk.identity != ct.identity:
            return None
        return _unmask(ct, usk)

class BF:
    """Single-exponent identity-based encryption."""

    def __init__(self, group=None):
        self.group = GroupContext() if group is None else group

    def setup(self):
        alpha = random_field_element()
        return MasterSecretKey(alpha), MasterPublicKey(self.group.lift_gt(alpha))

    def keygen(self, msk, identity):
        r = random_field_element()
        xid = hash_to_field(identity)
        exponent = (msk.alpha + r * xid) % ORDER
        return IdentityKey(identity, self.group.lift_g2(r), self.group.lift_g2(exponent))

    def encrypt(self, mpk, identity, msg):
        s = random_field_element()
        xid = hash_to_field(identity)
        return IdentityCiphertext(identity, (mpk.a ** s) * msg,
                                  self.group.lift_g1(s), self.group.lift_g1((s * xid) % ORDER))

    def decrypt(self, usk, ct):
        if usk.identity != ct.identity:
            return None
        return _unmask(ct, usk)

def share_secret(secret, n):
    """Split `secret` into `n` random additive shares modulo the group order."""
    shares = random_vector(n - 1)
    first = secret
    for share in shares:
        first = first - share
    return [first % ORDER] + shares

def can_decrypt(key_identity, ct_identity):
    """A key decrypts for its own identity and for every identity below it."""
    if len(key_identity) > len(ct_identity):
        return False
    return all(x == y for x, y in zip(key_identity, ct_identity))

def _check_levels(identity):
    if len(identity) == 0:
        raise ValueError("hierarchical identity needs at least one level")

class LW:
    """Hierarchical IBE with per-level secret shares and key delegation."""

    def __init__(self, group=None):
        self.group = GroupContext() if group is None else group

    def setup(self):
        """Returns `(msk, mpk)`."""
        alpha, b, b_0, b_1 = random_vector(4)
        msk = MasterSecretKey(alpha, b=b, b_0=b_0, b_1=b_1)
        mpk = MasterPublicKey(self.group.lift_gt(alpha),
                              b_g1=self.group.lift_g1(b), b_g2=self.group.lift_g2(b),
                              b_0_g1=self.group.lift_g1(b_0), b_0_g2=self.group.lift_g2(b_0),
                              b_1_g1=self.group.lift_g1(b_1), b_1_g2=self.group.lift_g2(b_1))
        return msk, mpk

    def keygen(self, msk, identity):
        """Derive the key of a hierarchical identity.

        Parameters
        ----------
        msk : MasterSecretKey
        identity : list of str
            one string per level, at least one

        Returns
        -------
        HierarchicalKey
        """
        _check_levels(identity)
        rs = random_vector(len(identity))
        lambdas = share_secret(msk.alpha, len(identity))

        k = []
        k_1 = []
        k_2 = []
        for r, lam, level in zip(rs, lambdas, identity):
            xid = hash_to_field(level)
            k.append(self.group.lift_g2(r))
            k_1.append(self.group.lift_g2((lam + r * msk.b) % ORDER))
            k_2.append(self.group.lift_g2((r * (msk.b_0 + xid * msk.b_1)) % ORDER))
        return HierarchicalKey(list(identity), k, k_1, k_2)

    def encrypt(self, mpk, identity, msg):
        """Encrypt the GT element `msg` to a hierarchical identity."""
        _check_levels(identity)
        s = random_field_element()
        ss = random_vector(len(identity))

        c_i = []
        c_i_alt = []
        for s_i, level in zip(ss, identity):
            xid = hash_to_field(level)
            c_i.append((mpk.b_g1 ** s) * ((mpk.b_0_g1 * (mpk.b_1_g1 ** xid)) ** s_i))
            c_i_alt.append(self.group.lift_g1(s_i))
        return HierarchicalCiphertext(list(identity), (mpk.a ** s) * msg,
                                      self.group.lift_g1(s), c_i, c_i_alt)

    def delegate(self, mpk, usk, extension):
        """Extend `usk` by one level without the master secret.

        Every existing level is rerandomized and the shares of `alpha` are
        reshuffled, so the delegated key is distributed like a fresh one.

        Parameters
        ----------
        mpk : MasterPublicKey
        usk : HierarchicalKey
        extension : str
            identity string of the new level

        Returns
        -------
        HierarchicalKey
            key for `usk.identity + [extension]`
        """
        n = len(usk.identity)
        _check_levels(usk.identity)
        lambdas = random_vector(n)
        rs = random_vector(n + 1)
        identity = list(usk.identity) + [extension]

        k = []
        k_1 = []
        k_2 = []
        for i in range(n):
            xid = hash_to_field(identity[i])
            k.append(usk.k[i] * self.group.lift_g2(rs[i]))
            k_1.append(usk.k_1[i] * self.group.lift_g2(lambdas[i]) * (mpk.b_g2 ** rs[i]))
            k_2.append(usk.k_2[i] * ((mpk.b_0_g2 * (mpk.b_1_g2 ** xid)) ** rs[i]))

        lambda_sum = ZERO
        for lam in lambdas:
            lambda_sum = lambda_sum + lam
        xid = hash_to_field(extension)
        k.append(self.group.lift_g2(rs[n]))
        k_1.append(self.group.lift_g2((ORDER - lambda_sum % ORDER) % ORDER) * (mpk.b_g2 ** rs[n]))
        k_2.append((mpk.b_0_g2 * (mpk.b_1_g2 ** xid)) ** rs[n])
        return HierarchicalKey(identity, k, k_1, k_2)

    def decrypt(self, usk, ct):
        """Returns the message, or `None` unless the key's identity is a prefix of the ciphertext's."""
        _check_levels(usk.identity)
        if not can_decrypt(usk.identity, ct.identity):
            return None

        k_1_sum = usk.k_1[0]
        for x in usk.k_1[1:]:
            k_1_sum = k_1_sum * x
        # e(c, prod k_1) * prod e(c_i, k_i)^-1 * e(c_i', k_2_i) = e(g1,g2)^(s alpha)
        mask = ct.c.pair(k_1_sum)
        for i in range(len(usk.identity)):
            mask = mask * ct.c_i[i].pair(usk.k[i]) ** (-1)
            mask = mask * ct.c_i_alt[i].pair(usk.k_2[i])
        return ct.msg * mask ** (-1)
