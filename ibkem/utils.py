"""Helper utility functions: hashing, point encoding and identity generation.
"""

import secrets
import string

from blake3 import blake3
from petrelic.bn import Bn

from ibkem.groups import ORDER

IDENTITY_DOMAIN = b"IDENTITY"

def hash_bytes(data, length=32):
    """BLAKE3 digest of `data`, extended to `length` bytes."""
    return blake3(bytes(data)).digest(length=length)

def hash_to_bits(data, n):
    """Hash `data` to a list of `n` bits.

    Parameters
    ----------
    data : bytes
        hash input
    n : int
        number of output bits

    Returns
    -------
    list of int
        `n` bits, least significant bit of each digest byte first
    """
    digest = hash_bytes(data, max((n + 7) // 8, 1))
    return [(digest[i // 8] >> (i % 8)) & 1 for i in range(n)]

def bits_to_bytes(bits):
    """Pack bits (least significant first within a byte) into bytes."""
    out = bytearray((len(bits) + 7) // 8)
    for i, bit in enumerate(bits):
        if bit:
            out[i // 8] |= 1 << (i % 8)
    return bytes(out)

def hash_identity(data, bits=128):
    """Derive the canonical `bits`-bit identity string of an arbitrary input.

    Parameters
    ----------
    data : bytes or str
        e.g. an e-mail address
    bits : int (optional)
        identity length in bits

    Returns
    -------
    bytes
        `ceil(bits/8)` bytes; unused high bits of the last byte are zero
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    return bits_to_bytes(hash_to_bits(data, bits))

def hash_to_field(data, domain=IDENTITY_DOMAIN):
    """Hash `data` to a scalar modulo the group order (domain separated)."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    digest = hash_bytes(domain + b"\x00" + data, 64)
    return Bn.from_binary(digest) % ORDER

def serialize_g1(point):
    """Canonical byte encoding of a G1 point."""
    return point.to_binary()

def serialize_points(points):
    """Concatenated canonical encodings of a sequence of points."""
    return b"".join(serialize_g1(p) for p in points)

def random_message(num_bytes=16):
    return secrets.token_bytes(num_bytes)

def random_email():
    """Random e-mail address of the form `name@domain.tld`."""
    chars = string.ascii_lowercase + string.digits
    name = "".join(secrets.choice(chars) for _ in range(6 + secrets.randbelow(6)))
    domain = "".join(secrets.choice(chars) for _ in range(5 + secrets.randbelow(5)))
    tld = "".join(secrets.choice(string.ascii_lowercase) for _ in range(2 + secrets.randbelow(2)))
    return "{}@{}.{}".format(name, domain, tld).encode("ascii")

def generate_email_and_identity(bits=128):
    """Random e-mail address together with its hashed identity.

    Returns
    -------
    email : bytes
    identity : bytes
        `hash_identity(email, bits)`
    """
    email = random_email()
    return email, hash_identity(email, bits)
