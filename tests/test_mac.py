import pytest

from ibkem.mac import AffineMAC,Tag
from ibkem.encoding import domain_size
from ibkem.utils import random_message

def test_affine_mac_small_ok():
    mac = AffineMAC(2, domain_size(4), 0)
    sk = mac.gen_mac()
    message = bytes([1, 0, 1, 1])
    tag = mac.tag(sk, message)
    assert mac.verify(sk, message, tag)

def test_affine_mac_small_fail():
    mac = AffineMAC(2, domain_size(4), 0)
    sk = mac.gen_mac()
    tag = mac.tag(sk, bytes([1, 0, 1, 1]))
    assert not mac.verify(sk, bytes([0, 0, 1, 1]), tag)

def test_affine_mac_large():
    mac = AffineMAC(2, domain_size(128), 0)
    sk = mac.gen_mac()
    message = random_message(16)
    tag = mac.tag(sk, message)
    assert mac.verify(sk, message, tag)
    other = bytes([message[0] ^ 0x80]) + message[1:]
    assert not mac.verify(sk, other, tag)

def test_key_shapes():
    mac = AffineMAC(3, 9, 2)
    sk = mac.gen_mac()
    assert len(sk.B) == 3 and len(sk.B[0]) == 3
    assert len(sk.X) == 10
    assert all(len(x) == 6 and len(x[0]) == 3 for x in sk.X)
    assert len(sk.X_prime) == 3
    assert all(len(x) == 6 for x in sk.X_prime)

def test_tag_shapes_and_freshness():
    mac = AffineMAC(2, domain_size(4))
    sk = mac.gen_mac()
    t1 = mac.tag(sk, b"\x0d")
    t2 = mac.tag(sk, b"\x0d")
    assert len(t1.t_g2) == 2 and len(t1.u_g2) == 4 and len(t1.t_field) == 2
    assert t1.t_g2 != t2.t_g2
    assert mac.verify(sk, b"\x0d", t2)

def test_larger_k_and_constant_terms():
    mac = AffineMAC(3, domain_size(8), 2)
    sk = mac.gen_mac()
    tag = mac.tag(sk, b"\xa5")
    assert mac.verify(sk, b"\xa5", tag)
    assert not mac.verify(sk, b"\xa4", tag)

def test_tag_from_other_key_fails():
    mac = AffineMAC(2, domain_size(4))
    sk = mac.gen_mac()
    tag = mac.tag(mac.gen_mac(), b"\x0d")
    assert not mac.verify(sk, b"\x0d", tag)

def test_short_message_rejected():
    mac = AffineMAC(2, domain_size(128))
    sk = mac.gen_mac()
    with pytest.raises(ValueError):
        mac.tag(sk, b"too short")

def test_malformed_tag_rejected():
    mac = AffineMAC(2, domain_size(4))
    sk = mac.gen_mac()
    tag = mac.tag(sk, b"\x0d")
    with pytest.raises(ValueError):
        mac.verify(sk, b"\x0d", Tag(tag.t_g2[:1], tag.u_g2, tag.t_field))

def test_invalid_parameters():
    with pytest.raises(ValueError):
        AffineMAC(0, 9)
    with pytest.raises(ValueError):
        AffineMAC(2, -1)
