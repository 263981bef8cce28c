import pytest

from petrelic.multiplicative.pairing import G1

from ibkem.qanizk import QANIZK,Proof
from ibkem.groups import GroupContext,random_matrix,random_vector
from ibkem.utils import random_message
from ibkem import linalg

K = 2

@pytest.fixture(scope="module")
def instance():
    group = GroupContext()
    qanizk = QANIZK(K, 128, group=group)
    m = random_matrix(3 * K, K)
    m_g1 = group.matrix_lift_g1(m)
    crs, trapdoor = qanizk.gen_crs(m_g1)
    return qanizk, group, m, crs, trapdoor

def statement(group, m):
    r = random_vector(K)
    return group.vector_lift_g1(linalg.matrix_vector_mul(m, r)), r

def test_crs_shapes(instance):
    qanizk, _, _, crs, trapdoor = instance
    assert crs.lam == 128
    assert linalg.shape(crs.a_g2) == (K + 1, K)
    assert linalg.shape(crs.ka_g2) == (3 * K, K)
    assert linalg.shape(crs.b_g1) == (K, K)
    assert linalg.shape(crs.mk_g1) == (K, K + 1)
    assert all(linalg.shape(m) == (K, K) for pair in crs.kjb_a_g2 for m in pair)
    assert all(linalg.shape(m) == (K, K + 1) for pair in crs.bt_kjb_g1 for m in pair)
    assert linalg.shape(trapdoor.k_matrix) == (3 * K, K + 1)
    assert not any(v is trapdoor.k_matrix for v in vars(crs).values())

def test_qanizk_ok(instance):
    qanizk, group, m, crs, _ = instance
    c0, r = statement(group, m)
    tag = random_message()
    proof = qanizk.prove(crs, tag, c0, r)
    assert len(proof.t1_g1) == K
    assert len(proof.u1_g1) == K + 1
    assert qanizk.verify(crs, tag, c0, proof)

def test_qanizk_wrong_tag(instance):
    qanizk, group, m, crs, _ = instance
    c0, r = statement(group, m)
    proof = qanizk.prove(crs, b"tag", c0, r)
    assert not qanizk.verify(crs, b"tah", c0, proof)

def test_qanizk_replayed_on_other_statement(instance):
    qanizk, group, m, crs, _ = instance
    c0, r = statement(group, m)
    other, _ = statement(group, m)
    proof = qanizk.prove(crs, b"tag", c0, r)
    assert not qanizk.verify(crs, b"tag", other, proof)

def test_qanizk_non_member(instance):
    qanizk, group, m, crs, _ = instance
    _, r = statement(group, m)
    c0 = group.vector_lift_g1(random_vector(3 * K))
    proof = qanizk.prove(crs, b"tag", c0, r)
    assert not qanizk.verify(crs, b"tag", c0, proof)

def test_qanizk_tampered_proof(instance):
    qanizk, group, m, crs, _ = instance
    c0, r = statement(group, m)
    proof = qanizk.prove(crs, b"tag", c0, r)
    u1 = list(proof.u1_g1)
    u1[0] = u1[0] * group.g1
    assert not qanizk.verify(crs, b"tag", c0, Proof(proof.t1_g1, u1))
    t1 = list(proof.t1_g1)
    t1[0] = t1[0] * group.g1
    assert not qanizk.verify(crs, b"tag", c0, Proof(t1, proof.u1_g1))

def test_qanizk_proof_from_other_crs(instance):
    qanizk, group, m, crs, _ = instance
    other_crs, _ = qanizk.gen_crs(group.matrix_lift_g1(m))
    c0, r = statement(group, m)
    proof = qanizk.prove(other_crs, b"tag", c0, r)
    assert qanizk.verify(other_crs, b"tag", c0, proof)
    assert not qanizk.verify(crs, b"tag", c0, proof)

def test_qanizk_shape_mismatch(instance):
    qanizk, group, m, crs, _ = instance
    c0, r = statement(group, m)
    proof = qanizk.prove(crs, b"tag", c0, r)
    with pytest.raises(ValueError):
        qanizk.verify(crs, b"tag", c0[:-1], proof)
    with pytest.raises(ValueError):
        qanizk.verify(crs, b"tag", c0, Proof(proof.t1_g1, proof.u1_g1[:-1]))
    with pytest.raises(ValueError):
        qanizk.prove(crs, b"tag", c0, r + r)
    with pytest.raises(ValueError):
        QANIZK(K, 64).verify(crs, b"tag", c0, proof)

def test_small_lambda():
    group = GroupContext()
    qanizk = QANIZK(1, 8, group=group)
    m = random_matrix(3, 1)
    crs, _ = qanizk.gen_crs(group.matrix_lift_g1(m))
    r = random_vector(1)
    c0 = linalg.group_matrix_vector_mul(group.matrix_lift_g1(m), r, G1)
    proof = qanizk.prove(crs, b"", c0, r)
    assert qanizk.verify(crs, b"", c0, proof)

def test_verification_is_deterministic(instance):
    qanizk, group, m, crs, _ = instance
    c0, r = statement(group, m)
    proof = qanizk.prove(crs, b"tag", c0, r)
    weights = qanizk.derive_weights(b"tag", c0, proof)
    assert len(weights) == K
    assert weights == qanizk.derive_weights(b"tag", c0, proof)
    assert weights != qanizk.derive_weights(b"tah", c0, proof)
    other = qanizk.prove(crs, b"tag", c0, r)
    assert weights != qanizk.derive_weights(b"tag", c0, other)
    assert all(qanizk.verify(crs, b"tag", c0, proof) for _ in range(3))
    assert not any(qanizk.verify(crs, b"tah", c0, proof) for _ in range(3))
