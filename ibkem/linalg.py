#!/usr/bin/env python3

"""Matrix and vector arithmetic over the scalar field and over G1/G2.

Field vectors are lists of `Bn` reduced modulo the group order, matrices are
lists of rows. Group vectors and matrices use the same layout with group
elements as entries; functions acting on them take the group class (`G1` or
`G2`) so that products can be computed with a multi-exponentiation
(`wprod`).

Every function checks the shapes it relies on and raises `ValueError` on a
mismatch.
"""

from ibkem.groups import ORDER,ZERO

def check_dimension(what, actual, expected):
    """Raise `ValueError` unless `actual == expected`."""
    if actual != expected:
        raise ValueError("{}: expected dimension {}, got {}".format(what, expected, actual))

def shape(matrix):
    """Return `(rows, cols)` of a non-empty rectangular matrix."""
    if len(matrix) == 0 or len(matrix[0]) == 0:
        raise ValueError("empty matrix")
    cols = len(matrix[0])
    for row in matrix:
        check_dimension("matrix row", len(row), cols)
    return len(matrix), cols

### field side

def vector_add(a, b):
    check_dimension("vector_add", len(b), len(a))
    return [(x + y) % ORDER for x, y in zip(a, b)]

def vector_scale(c, v):
    return [(c * x) % ORDER for x in v]

def vector_concat(a, b):
    return list(a) + list(b)

def matrix_transpose(matrix):
    """Transpose a matrix of any entry type."""
    rows, cols = shape(matrix)
    return [[matrix[i][j] for i in range(rows)] for j in range(cols)]

def matrix_concat(a, b):
    """Row-wise concatenation `(a || b)`: rows are joined, columns appended."""
    check_dimension("matrix_concat rows", len(b), len(a))
    return [list(ra) + list(rb) for ra, rb in zip(a, b)]

def matrix_vector_mul(matrix, vector):
    """Compute `matrix * vector`."""
    _, cols = shape(matrix)
    check_dimension("matrix_vector_mul", len(vector), cols)
    result = []
    for row in matrix:
        acc = ZERO
        for a, b in zip(row, vector):
            acc = acc + a * b
        result.append(acc % ORDER)
    return result

def matrix_transpose_vector_mul(matrix, vector):
    """Compute `matrix^T * vector` without materialising the transpose."""
    rows, cols = shape(matrix)
    check_dimension("matrix_transpose_vector_mul", len(vector), rows)
    result = []
    for j in range(cols):
        acc = ZERO
        for i in range(rows):
            acc = acc + matrix[i][j] * vector[i]
        result.append(acc % ORDER)
    return result

def matrix_multiply(a, b):
    rows_a, cols_a = shape(a)
    rows_b, cols_b = shape(b)
    check_dimension("matrix_multiply", rows_b, cols_a)
    result = []
    for i in range(rows_a):
        row = []
        for j in range(cols_b):
            acc = ZERO
            for k in range(cols_a):
                acc = acc + a[i][k] * b[k][j]
            row.append(acc % ORDER)
        result.append(row)
    return result

### group side

def group_vector_mul(a, b):
    """Entrywise group product of two group vectors (the vector "sum")."""
    check_dimension("group_vector_mul", len(b), len(a))
    return [x * y for x, y in zip(a, b)]

def group_matrix_mul(a, b):
    """Entrywise group product of two group matrices (the matrix "sum")."""
    check_dimension("group_matrix_mul rows", len(b), len(a))
    return [group_vector_mul(ra, rb) for ra, rb in zip(a, b)]

def group_matrix_pow(matrix, c):
    """Raise every entry of a group matrix to the scalar `c`."""
    return [[x ** c for x in row] for row in matrix]

def group_matrix_vector_mul(matrix, vector, group):
    """Compute `[M] * v` for a group matrix `[M]` and field vector `v`.

    Each output coordinate is one multi-exponentiation over a row of `[M]`.

    Parameters
    ----------
    matrix : list of lists of group elements
        n x m matrix in `group`
    vector : list of Bn
        length m
    group : G1 or G2
        group the matrix lives in

    Returns
    -------
    list of group elements
        length n
    """
    _, cols = shape(matrix)
    check_dimension("group_matrix_vector_mul", len(vector), cols)
    return [group.wprod(vector, row) for row in matrix]

def vector_group_matrix_mul(vector, matrix, group):
    """Compute `v^T * [M]` for a field vector `v` and group matrix `[M]`."""
    rows, cols = shape(matrix)
    check_dimension("vector_group_matrix_mul", len(vector), rows)
    return [group.wprod(vector, [matrix[i][j] for i in range(rows)]) for j in range(cols)]

def matrix_group_vector_mul(matrix, vector, group):
    """Compute `M * [v]` for a field matrix `M` and group vector `[v]`."""
    _, cols = shape(matrix)
    check_dimension("matrix_group_vector_mul", len(vector), cols)
    return [group.wprod(row, vector) for row in matrix]

def group_matrix_field_mul(left, right, group):
    """Compute `[L] * R` for a group matrix `[L]` and field matrix `R`."""
    rows_l, cols_l = shape(left)
    rows_r, cols_r = shape(right)
    check_dimension("group_matrix_field_mul", rows_r, cols_l)
    columns = matrix_transpose(right)
    return [[group.wprod(columns[j], left[i]) for j in range(cols_r)] for i in range(rows_l)]

def group_matrix_sum(matrices):
    """Entrywise group product of a non-empty list of equally shaped group matrices."""
    if len(matrices) == 0:
        raise ValueError("cannot aggregate an empty list of matrices")
    rows, cols = shape(matrices[0])
    result = [list(row) for row in matrices[0]]
    for m in matrices[1:]:
        check_dimension("group_matrix_sum shape", shape(m), (rows, cols))
        for i in range(rows):
            for j in range(cols):
                result[i][j] = result[i][j] * m[i][j]
    return result
