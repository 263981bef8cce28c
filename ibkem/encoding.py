#!/usr/bin/env python3

"""Identity-encoding functions `f_i` and `f'_i`.

An identity is a byte string whose bits are read least significant bit first
within each byte. Indices `2, 3, ..., 2*m+1` form a one-hot encoding of the
first `m` bits: index `2*j + 2 + b` is active iff bit `j` equals `b`. Indices
0 and 1 are reserved and always map to zero.

Examples
--------
>>> active_indices(9, b"\\x0d")
[3, 4, 7, 9]
"""

from ibkem.groups import ZERO,ONE

def domain_size(identity_bits):
    """Conventional `l` for identities of `identity_bits` bits (`2*bits + 1`)."""
    return 2 * identity_bits + 1

def encoded_bits(l):
    """Number of identity bits that the indices `0..l` encode."""
    return max(l - 1, 0) // 2

def bit_at(message, index):
    """Bit `index` of `message`, least significant bit of each byte first."""
    return (message[index // 8] >> (index % 8)) & 1

def f_i(i, l, message):
    """Coefficient of index `i` for `message`.

    Parameters
    ----------
    i : int
        index in `0..l`
    l : int
        size parameter of the encoding
    message : bytes
        identity bit string

    Returns
    -------
    Bn
        `1` if the index is active for `message`, else `0`
    """
    if i in (0, 1):
        return ZERO
    bit_index, bit_value = divmod(i - 2, 2)
    if bit_index >= l or bit_index >= 8 * len(message):
        return ZERO
    return ONE if bit_at(message, bit_index) == bit_value else ZERO

def f_prime_i(i):
    """Coefficient of constant-term index `i`; only index 0 is ever active."""
    return ONE if i == 0 else ZERO

def active_indices(l, message):
    """Indices `i` in `0..l` with `f_i(i, l, message) != 0`, in increasing order.

    Picks `2*j + 2 + bit_j` directly instead of evaluating `f_i` on the whole
    range, with identical results.
    """
    indices = []
    for bit_index in range(min(l, 8 * len(message))):
        i = 2 * bit_index + 2 + bit_at(message, bit_index)
        if i > l:
            break
        indices.append(i)
    return indices

def active_terms(l, message):
    """`(i, f_i)` pairs for the active indices of `message`."""
    return [(i, f_i(i, l, message)) for i in active_indices(l, message)]

def active_prime_terms(l_prime):
    """`(i, f'_i)` pairs for the active constant-term indices in `0..l_prime`."""
    return [(i, f_prime_i(i)) for i in range(l_prime + 1) if f_prime_i(i) != ZERO]
