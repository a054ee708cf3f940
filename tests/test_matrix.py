import pytest

from matscript.matrix import (
    Matrix,
    MatrixError,
    add_matrices,
    create_matrix,
    format_matrix,
    multiply_matrices,
    transpose,
)


def make(rows, cols, values, name="?"):
    return Matrix(name, rows, cols, tuple(values))


def test_add01():
    a = make(3, 5, [-4, 18, 6, 7, 10, -14, 29, 8, 21, -99, 0, 7, 5, 2, -9])
    b = make(3, 5, [10, 9, -2, -33, 22, 44, 10, 12, 72, 52, -88, 17, 16, 14, -9])
    c = add_matrices(a, b)
    assert (c.num_rows, c.num_cols) == (3, 5)
    assert c.values == (6, 27, 4, -26, 32, 30, 39, 20, 93, -47, -88, 24, 21, 16, -18)


def test_add02():
    q = make(1, 4, [-123, 47, -4, 140])
    g = make(1, 4, [-16, 122, 135, 107])
    z = q + g
    assert (z.num_rows, z.num_cols) == (1, 4)
    assert z.values == (-139, 169, 131, 247)
    assert z.name == "?"


def test_mult01():
    g = make(6, 4, [83, -22, 56, -1, 97, 94, 135, -10, 84, 40, -83, -4, 79, 28, 52, -101,
                    138, 146, 99, 0, -23, -73, -39, -47])
    d = make(4, 7, [-77, -20, 111, -2, 41, 117, 118, 21, -29, -45, 135, 98, 54, 131, 54, 1,
                    80, 143, -127, 148, 114, -81, 87, -33, -2, -6, 115, 59])
    z = multiply_matrices(g, d)
    assert (z.num_rows, z.num_cols) == (6, 7)
    assert z.values == (
        -3748, -1053, 14716, 4874, -5859, 16696, 13237, 2605, -5401, 17667, 31821, -3896,
        35255, 38560, -9786, -3271, 1016, -6629, 17929, -756, 5454, 5494, -11127, 15002,
        11260, -15, 6836, 12959, -2214, -6895, 16668, 33591, 7393, 38682, 46696, 1939,
        -1551, -837, -15292, -2862, -17810, -19496,
    )


def test_mult02():
    u = make(7, 1, [-38, 4, 46, -14, -102, -72, -27])
    n = make(1, 5, [52, 65, -94, -73, -48])
    z = u @ n
    assert (z.num_rows, z.num_cols) == (7, 5)
    assert z.values == (
        -1976, -2470, 3572, 2774, 1824, 208, 260, -376, -292, -192, 2392, 2990, -4324,
        -3358, -2208, -728, -910, 1316, 1022, 672, -5304, -6630, 9588, 7446, 4896, -3744,
        -4680, 6768, 5256, 3456, -1404, -1755, 2538, 1971, 1296,
    )


def test_trans01():
    m = make(4, 4, [-7, 78, -87, -113, -144, -94, 22, -75, -137, -130, -113, -106, 85,
                    -120, 50, 55])
    g = transpose(m)
    assert (g.num_rows, g.num_cols) == (4, 4)
    assert g.values == (-7, -144, -137, 85, 78, -94, -130, -120, -87, 22, -113, 50, -113,
                        -75, -106, 55)


def test_trans02():
    x = make(6, 3, [121, -1, 128, 78, -138, 138, -61, 51, -35, -84, 125, -83, -78, 138, 2,
                    81, -5, -36])
    g = transpose(x)
    assert (g.num_rows, g.num_cols) == (3, 6)
    assert g.values == (121, 78, -61, -84, -78, 81, -1, -138, 51, 125, 138, -5, 128, 138,
                        -35, -83, 2, -36)


def test_transpose_twice_is_identity():
    x = make(2, 3, [1, 2, 3, 4, 5, 6], name="X")
    assert transpose(transpose(x)).values == x.values


def test_create01():
    mat = create_matrix("V", "8 1 [-105 ; -19 ; -140 ; 122 ; -123 ; 105 ; 90 ; 90 ; ]")
    assert (mat.num_rows, mat.num_cols) == (8, 1)
    assert mat.values == (-105, -19, -140, 122, -123, 105, 90, 90)
    assert mat.name == "V"


def test_create02():
    mat = create_matrix(
        "Z",
        "7 3 [137 39 111 ; -142 -128 -45 ; 116 -135 134 ; 91 64 32 ; 88 148 139 ; "
        "51 -45 35 ; 143 89 -64 ; ]",
    )
    assert (mat.num_rows, mat.num_cols) == (7, 3)
    assert mat.values == (137, 39, 111, -142, -128, -45, 116, -135, 134, 91, 64, 32, 88,
                          148, 139, 51, -45, 35, 143, 89, -64)
    assert mat.name == "Z"


def test_create_rejects_missing_dimensions():
    with pytest.raises(MatrixError):
        create_matrix("A", "[1 2 3]")


def test_create_rejects_too_few_values():
    with pytest.raises(MatrixError):
        create_matrix("A", "2 2 [1 2 3]")


def test_create_ignores_surplus_values():
    mat = create_matrix("A", "1 2 [5 6 7]")
    assert mat.values == (5, 6)


def test_add_shape_mismatch():
    with pytest.raises(MatrixError):
        add_matrices(make(1, 2, [1, 2]), make(2, 1, [1, 2]))


def test_mult_shape_mismatch():
    with pytest.raises(MatrixError):
        multiply_matrices(make(1, 2, [1, 2]), make(1, 2, [1, 2]))


def test_constructor_checks_value_count():
    with pytest.raises(MatrixError):
        Matrix("A", 2, 2, (1, 2, 3))


def test_multiplication_wraps_to_32_bits():
    big = make(1, 1, [2 ** 31 - 1])
    two = make(1, 1, [2])
    assert (big @ two).values == (-2,)


def test_renamed_keeps_values():
    m = make(1, 2, [3, 4], name="A")
    r = m.renamed("B")
    assert (r.name, r.values, m.name) == ("B", (3, 4), "A")


def test_rows():
    m = make(2, 2, [1, 2, 3, 4])
    assert m.rows() == [(1, 2), (3, 4)]


def test_format_matrix():
    m = make(1, 4, [-139, 169, 131, 247])
    assert format_matrix(m) == "1 4 -139 169 131 247"
    assert str(m) == "1 4 -139 169 131 247"


def test_format_rejects_huge_matrix():
    with pytest.raises(MatrixError):
        format_matrix(Matrix("A", 1001, 0, ()))