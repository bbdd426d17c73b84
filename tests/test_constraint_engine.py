import itertools

from queens.components.cell_marker import MarkerState
from queens.systems.constraint_engine import (
    full_violations,
    incremental_violations,
    is_geometric_conflict,
    queen_positions,
    queens_conflict,
    validate_solution,
)
from tests.helpers import VALID_SOLUTION, column_regions


def _markers(queens, size=8):
    grid = [[MarkerState.EMPTY] * size for _ in range(size)]
    for r, c in queens:
        grid[r][c] = MarkerState.QUEEN
    return grid


def test_marker_cycle():
    assert MarkerState.EMPTY.next() == MarkerState.MARKED
    assert MarkerState.MARKED.next() == MarkerState.QUEEN
    assert MarkerState.QUEEN.next() == MarkerState.EMPTY


def test_shared_row_conflicts():
    assert queens_conflict((2, 2), (2, 5), column_regions())


def test_shared_column_conflicts():
    assert is_geometric_conflict((0, 3), (6, 3))


def test_diagonal_neighbours_conflict():
    assert queens_conflict((1, 1), (2, 2), column_regions())


def test_distant_queens_in_different_regions_do_not_conflict():
    assert not queens_conflict((0, 0), (7, 7), column_regions())


def test_same_region_conflicts_without_geometry():
    regions = column_regions()
    regions[5][6] = regions[0][0]
    assert not is_geometric_conflict((0, 0), (5, 6))
    assert queens_conflict((0, 0), (5, 6), regions)


def test_conflict_is_symmetric():
    regions = column_regions()
    regions[3][5] = regions[6][1]
    cells = [(0, 0), (1, 1), (2, 5), (3, 5), (6, 1), (7, 7), (4, 2)]
    for a, b in itertools.permutations(cells, 2):
        assert queens_conflict(a, b, regions) == queens_conflict(b, a, regions)


def test_incremental_flags_both_members_only():
    regions = column_regions()
    flagged = incremental_violations((2, 2), [(2, 5), (6, 7), (2, 2)], regions)
    assert flagged == {(2, 2), (2, 5)}


def test_incremental_without_conflicts_is_empty():
    assert incremental_violations((0, 0), [(0, 0), (7, 7)], column_regions()) == set()


def test_full_violations_over_all_pairs():
    queens = [(2, 2), (2, 5), (5, 0), (6, 1)]
    assert full_violations(queens, column_regions()) == {(2, 2), (2, 5), (5, 0), (6, 1)}
    assert full_violations([(0, 0), (7, 7)], column_regions()) == set()


def test_queen_positions_row_major():
    markers = _markers([(3, 1), (0, 4)])
    markers[5][5] = MarkerState.MARKED
    assert queen_positions(markers) == [(0, 4), (3, 1)]


def test_valid_solution_accepted():
    assert validate_solution(_markers(VALID_SOLUTION), column_regions(), set())


def test_two_queens_in_a_row_rejected():
    queens = VALID_SOLUTION + [(0, 5)]
    assert not validate_solution(_markers(queens), column_regions(), set())


def test_two_queens_in_one_region_rejected_even_without_violations():
    regions = column_regions()
    regions[1][2] = regions[0][0]
    assert not validate_solution(_markers(VALID_SOLUTION), regions, set())


def test_pending_violation_rejects_otherwise_complete_board():
    assert not validate_solution(_markers(VALID_SOLUTION), column_regions(), {(0, 0)})


def test_missing_row_rejected():
    assert not validate_solution(_markers(VALID_SOLUTION[:-1]), column_regions(), set())
