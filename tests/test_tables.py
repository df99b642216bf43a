import numpy as np
import pytest

from blobmesh.tables import (CASE_TRIANGLES, CUBE_CORNERS, CUBE_EDGES,
                             EDGE_MASKS, TRI_TABLE, TRIANGLE_COUNTS,
                             case_triangles, triangle_count)

# Triangles per case in the published Lorensen/Bourke table
REFERENCE_COUNTS = [
    0, 1, 1, 2, 1, 2, 2, 3, 1, 2, 2, 3, 2, 3, 3, 2,
    1, 2, 2, 3, 2, 3, 3, 4, 2, 3, 3, 4, 3, 4, 4, 3,
    1, 2, 2, 3, 2, 3, 3, 4, 2, 3, 3, 4, 3, 4, 4, 3,
    2, 3, 3, 2, 3, 4, 4, 3, 3, 4, 4, 3, 4, 5, 5, 2,
    1, 2, 2, 3, 2, 3, 3, 4, 2, 3, 3, 4, 3, 4, 4, 3,
    2, 3, 3, 4, 3, 4, 4, 5, 3, 4, 4, 5, 4, 5, 5, 4,
    2, 3, 3, 4, 3, 4, 2, 3, 3, 4, 4, 5, 4, 5, 3, 2,
    3, 4, 4, 3, 4, 5, 3, 2, 4, 5, 5, 4, 5, 2, 4, 1,
    1, 2, 2, 3, 2, 3, 3, 4, 2, 3, 3, 4, 3, 4, 4, 3,
    2, 3, 3, 4, 3, 4, 4, 5, 3, 2, 4, 3, 4, 3, 5, 2,
    2, 3, 3, 4, 3, 4, 4, 5, 3, 4, 4, 5, 4, 5, 5, 4,
    3, 4, 4, 3, 4, 5, 5, 4, 4, 3, 5, 2, 5, 4, 2, 1,
    2, 3, 3, 4, 3, 4, 4, 5, 3, 4, 4, 5, 2, 3, 3, 2,
    3, 4, 4, 5, 4, 5, 5, 2, 4, 3, 5, 4, 3, 2, 4, 1,
    3, 4, 4, 5, 4, 5, 3, 4, 4, 5, 5, 2, 3, 4, 2, 1,
    2, 3, 3, 2, 3, 4, 2, 1, 3, 2, 4, 1, 2, 1, 1, 0,
]

# Published 12-bit edge table for the same corner numbering
REFERENCE_EDGE_TABLE = [
    0x0, 0x109, 0x203, 0x30a, 0x406, 0x50f, 0x605, 0x70c,
    0x80c, 0x905, 0xa0f, 0xb06, 0xc0a, 0xd03, 0xe09, 0xf00,
    0x190, 0x99, 0x393, 0x29a, 0x596, 0x49f, 0x795, 0x69c,
    0x99c, 0x895, 0xb9f, 0xa96, 0xd9a, 0xc93, 0xf99, 0xe90,
    0x230, 0x339, 0x33, 0x13a, 0x636, 0x73f, 0x435, 0x53c,
    0xa3c, 0xb35, 0x83f, 0x936, 0xe3a, 0xf33, 0xc39, 0xd30,
    0x3a0, 0x2a9, 0x1a3, 0xaa, 0x7a6, 0x6af, 0x5a5, 0x4ac,
    0xbac, 0xaa5, 0x9af, 0x8a6, 0xfaa, 0xea3, 0xda9, 0xca0,
    0x460, 0x569, 0x663, 0x76a, 0x66, 0x16f, 0x265, 0x36c,
    0xc6c, 0xd65, 0xe6f, 0xf66, 0x86a, 0x963, 0xa69, 0xb60,
    0x5f0, 0x4f9, 0x7f3, 0x6fa, 0x1f6, 0xff, 0x3f5, 0x2fc,
    0xdfc, 0xcf5, 0xfff, 0xef6, 0x9fa, 0x8f3, 0xbf9, 0xaf0,
    0x650, 0x759, 0x453, 0x55a, 0x256, 0x35f, 0x55, 0x15c,
    0xe5c, 0xf55, 0xc5f, 0xd56, 0xa5a, 0xb53, 0x859, 0x950,
    0x7c0, 0x6c9, 0x5c3, 0x4ca, 0x3c6, 0x2cf, 0x1c5, 0xcc,
    0xfcc, 0xec5, 0xdcf, 0xcc6, 0xbca, 0xac3, 0x9c9, 0x8c0,
    0x8c0, 0x9c9, 0xac3, 0xbca, 0xcc6, 0xdcf, 0xec5, 0xfcc,
    0xcc, 0x1c5, 0x2cf, 0x3c6, 0x4ca, 0x5c3, 0x6c9, 0x7c0,
    0x950, 0x859, 0xb53, 0xa5a, 0xd56, 0xc5f, 0xf55, 0xe5c,
    0x15c, 0x55, 0x35f, 0x256, 0x55a, 0x453, 0x759, 0x650,
    0xaf0, 0xbf9, 0x8f3, 0x9fa, 0xef6, 0xfff, 0xcf5, 0xdfc,
    0x2fc, 0x3f5, 0xff, 0x1f6, 0x6fa, 0x7f3, 0x4f9, 0x5f0,
    0xb60, 0xa69, 0x963, 0x86a, 0xf66, 0xe6f, 0xd65, 0xc6c,
    0x36c, 0x265, 0x16f, 0x66, 0x76a, 0x663, 0x569, 0x460,
    0xca0, 0xda9, 0xea3, 0xfaa, 0x8a6, 0x9af, 0xaa5, 0xbac,
    0x4ac, 0x5a5, 0x6af, 0x7a6, 0xaa, 0x1a3, 0x2a9, 0x3a0,
    0xd30, 0xc39, 0xf33, 0xe3a, 0x936, 0x83f, 0xb35, 0xa3c,
    0x53c, 0x435, 0x73f, 0x636, 0x13a, 0x33, 0x339, 0x230,
    0xe90, 0xf99, 0xc93, 0xd9a, 0xa96, 0xb9f, 0x895, 0x99c,
    0x69c, 0x795, 0x49f, 0x596, 0x29a, 0x393, 0x99, 0x190,
    0xf00, 0xe09, 0xd03, 0xc0a, 0xb06, 0xa0f, 0x905, 0x80c,
    0x70c, 0x605, 0x50f, 0x406, 0x30a, 0x203, 0x109, 0x0,
]


def test_table_shape():
    assert TRI_TABLE.shape == (256, 16)
    assert len(CASE_TRIANGLES) == 256
    assert len(TRIANGLE_COUNTS) == 256
    assert len(EDGE_MASKS) == 256


def test_table_is_read_only():
    with pytest.raises(ValueError):
        TRI_TABLE[1, 0] = 5


def test_triangle_counts_match_reference():
    assert list(TRIANGLE_COUNTS) == REFERENCE_COUNTS
    assert sum(TRIANGLE_COUNTS) == sum(REFERENCE_COUNTS)


def test_edge_masks_match_reference():
    assert list(EDGE_MASKS) == REFERENCE_EDGE_TABLE


def test_uniform_cases_are_empty():
    assert case_triangles(0) == ()
    assert case_triangles(255) == ()
    assert triangle_count(0) == 0
    assert triangle_count(255) == 0


@pytest.mark.parametrize(
    "case, expected",
    [
        (1, ((0, 8, 3),)),
        (2, ((0, 1, 9),)),
        (3, ((1, 8, 3), (9, 8, 1))),
        (15, ((9, 8, 10), (10, 8, 11))),
        (105, ((0, 8, 2), (2, 8, 11), (4, 9, 10), (4, 10, 6))),
        (254, ((0, 3, 8),)),
    ],
)
def test_known_rows(case, expected):
    assert case_triangles(case) == expected


def test_rows_are_padded_with_minus_one():
    for row, count in zip(TRI_TABLE, TRIANGLE_COUNTS):
        assert np.all(row[: 3 * count] >= 0)
        assert np.all(row[3 * count :] == -1)


def test_every_triangle_edge_changes_sign():
    for case in range(256):
        used = {edge for triangle in case_triangles(case) for edge in triangle}
        crossing = {edge for edge in range(12) if EDGE_MASKS[case] & (1 << edge)}
        assert used == crossing, case


def test_complementary_cases_cross_same_edges():
    for case in range(256):
        assert EDGE_MASKS[case] == EDGE_MASKS[255 - case]


def test_single_corner_cases_have_one_triangle():
    for corner in range(8):
        assert triangle_count(1 << corner) == 1
        assert triangle_count(255 - (1 << corner)) == 1


def test_corner_layout():
    assert CUBE_CORNERS.shape == (8, 3)
    assert {tuple(c) for c in CUBE_CORNERS.astype(int).tolist()} == {
        (x, y, z) for x in (0, 1) for y in (0, 1) for z in (0, 1)
    }
    assert CUBE_CORNERS[1].tolist() == [0, 1, 0]
    assert CUBE_CORNERS[3].tolist() == [1, 0, 0]


def test_edges_join_adjacent_corners():
    assert len(CUBE_EDGES) == 12
    for v0, v1 in CUBE_EDGES:
        assert np.abs(CUBE_CORNERS[v0] - CUBE_CORNERS[v1]).sum() == 1
