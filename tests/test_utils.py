from ibkem.groups import ORDER
from ibkem.utils import (hash_to_bits,bits_to_bytes,hash_identity,hash_to_field,
                         generate_email_and_identity,random_message,serialize_points)
from ibkem.groups import GroupContext,random_vector

def test_hash_to_bits():
    bits = hash_to_bits(b"tag", 128)
    assert len(bits) == 128
    assert set(bits) <= {0, 1}
    assert bits == hash_to_bits(b"tag", 128)
    assert bits != hash_to_bits(b"tah", 128)
    # longer outputs extend shorter ones
    assert hash_to_bits(b"tag", 300)[:128] == bits

def test_bits_to_bytes():
    assert bits_to_bytes([1, 0, 1, 1]) == b"\x0d"
    assert bits_to_bytes([0] * 8 + [1]) == b"\x00\x01"
    bits = hash_to_bits(b"x", 64)
    assert hash_to_bits(b"x", 64) == [(bits_to_bytes(bits)[i // 8] >> (i % 8)) & 1 for i in range(64)]

def test_hash_identity():
    identity = hash_identity(b"alice@example.org", 128)
    assert len(identity) == 16
    assert identity == hash_identity("alice@example.org", 128)
    assert identity != hash_identity(b"bob@example.org", 128)
    short = hash_identity(b"alice@example.org", 12)
    assert len(short) == 2
    assert short[1] < 16
    assert short[0] == identity[0]

def test_hash_to_field():
    x = hash_to_field("alice")
    assert x == hash_to_field(b"alice")
    assert x != hash_to_field("bob")
    assert x < ORDER
    assert x != hash_to_field("alice", domain=b"OTHER")

def test_generate_email_and_identity():
    email, identity = generate_email_and_identity(128)
    assert b"@" in email
    assert identity == hash_identity(email, 128)
    assert len(random_message()) == 16

def test_serialize_points_is_canonical():
    group = GroupContext()
    v = random_vector(3)
    a = group.vector_lift_g1(v)
    b = group.vector_lift_g1(v)
    assert serialize_points(a) == serialize_points(b)
    assert serialize_points(a) != serialize_points(list(reversed(a)))
