import pytest

from petrelic.multiplicative.pairing import G1,G2
from petrelic.bn import Bn

from ibkem import linalg
from ibkem.groups import GroupContext,ORDER,random_matrix,random_vector

def bn_matrix(rows):
    return [[Bn(x) for x in row] for row in rows]

def test_matrix_multiply():
    a = bn_matrix([[1, 2], [3, 4], [5, 6]])
    b = bn_matrix([[1, 0, 2], [0, 1, 3]])
    assert linalg.matrix_multiply(a, b) == bn_matrix([[1, 2, 8], [3, 4, 18], [5, 6, 28]])

def test_transpose_and_concat():
    a = bn_matrix([[1, 2], [3, 4]])
    b = bn_matrix([[5], [6]])
    assert linalg.matrix_transpose(a) == bn_matrix([[1, 3], [2, 4]])
    assert linalg.matrix_concat(a, b) == bn_matrix([[1, 2, 5], [3, 4, 6]])
    assert linalg.vector_concat([Bn(1)], [Bn(2), Bn(3)]) == [Bn(1), Bn(2), Bn(3)]

def test_transpose_vector_mul_matches_explicit_transpose():
    m = random_matrix(6, 2)
    v = random_vector(6)
    assert linalg.matrix_transpose_vector_mul(m, v) == \
        linalg.matrix_vector_mul(linalg.matrix_transpose(m), v)

def test_reduction_mod_order():
    minus_one = ORDER - Bn(1)
    assert linalg.vector_add([minus_one], [Bn(2)]) == [Bn(1)]
    assert linalg.vector_scale(minus_one, [minus_one]) == [Bn(1)]

def test_shape_errors():
    with pytest.raises(ValueError):
        linalg.matrix_multiply(bn_matrix([[1, 2]]), bn_matrix([[1, 2]]))
    with pytest.raises(ValueError):
        linalg.matrix_vector_mul(bn_matrix([[1, 2]]), [Bn(1)])
    with pytest.raises(ValueError):
        linalg.shape([])
    with pytest.raises(ValueError):
        linalg.shape(bn_matrix([[1, 2], [3]]))
    with pytest.raises(ValueError):
        linalg.vector_add([Bn(1)], [Bn(1), Bn(2)])
    with pytest.raises(ValueError):
        linalg.group_matrix_sum([])

def test_group_products_match_field_products():
    group = GroupContext()
    m = random_matrix(3, 2)
    r = random_matrix(2, 3)
    v = random_vector(2)
    w = random_vector(3)
    m_g1 = group.matrix_lift_g1(m)

    assert linalg.group_matrix_vector_mul(m_g1, v, G1) == \
        group.vector_lift_g1(linalg.matrix_vector_mul(m, v))
    assert linalg.vector_group_matrix_mul(w, m_g1, G1) == \
        group.vector_lift_g1(linalg.matrix_transpose_vector_mul(m, w))
    assert linalg.group_matrix_field_mul(m_g1, r, G1) == \
        group.matrix_lift_g1(linalg.matrix_multiply(m, r))
    assert linalg.matrix_group_vector_mul(m, group.vector_lift_g2(v), G2) == \
        group.vector_lift_g2(linalg.matrix_vector_mul(m, v))

def test_group_matrix_sum_and_pow():
    group = GroupContext()
    a = random_matrix(2, 2)
    b = random_matrix(2, 2)
    c = random_vector(1)[0]
    total = linalg.group_matrix_sum([group.matrix_lift_g1(a), group.matrix_lift_g1(b)])
    expected = [[(x + y) % ORDER for x, y in zip(ra, rb)] for ra, rb in zip(a, b)]
    assert total == group.matrix_lift_g1(expected)
    assert linalg.group_matrix_pow(group.matrix_lift_g1(a), c) == \
        group.matrix_lift_g1([linalg.vector_scale(c, row) for row in a])
