"""Identity-based key encapsulation (IBKEM) from affine MACs over BLS12-381.

Notes
-----
Two constructions are provided. `IBKEM1` turns an affine MAC into an IBKEM
that is secure against passive attackers. `IBKEM2` additionally attaches a
tag-based QANIZK proof to every ciphertext; the proof is bound to the
recipient identity and to `c0`, so decryption under any other identity is
rejected. We write `[x]_1`, `[x]_2` for the lift of a scalar `x` into G1/G2.

Examples
--------
Set up a scheme for 128-bit identities:

>>> from ibkem.algos import IBKEM2
>>> from ibkem.encoding import domain_size
>>> kem = IBKEM2(2, domain_size(128), lam=128)
>>> pk, sk = kem.setup()

Derive a user key for a (hashed) e-mail address:

>>> from ibkem.utils import hash_identity
>>> identity = hash_identity(b"alice@example.org", 128)
>>> usk = kem.extract(sk, identity)

Encapsulate and decapsulate:

>>> ct, key = kem.encrypt(pk, identity)
>>> kem.decrypt(pk, usk, identity, ct) == key
True

`IBKEM1` has the same setup and extract; its `decrypt(usk, ct)` takes no
public key or identity.
"""
