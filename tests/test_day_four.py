from adventofcode.day_four import PaperGrid

GRID_DATA = """..@@.@@@@.
@@@.@.@.@@
@@@@@.@.@@
@.@@@@..@.
@@.@@@@.@@
.@@@@@@@.@
.@.@.@.@@@
@.@@@.@@@@
.@@@@@@@@.
@.@.@@@.@."""


def test_example_accessible_count():
    assert len(PaperGrid(GRID_DATA).accessible()) == 13


def test_example_removal_total():
    assert PaperGrid(GRID_DATA).remove_until_stable() == 43


def test_full_square_only_corners_accessible():
    grid = PaperGrid("@@@\n@@@\n@@@")
    assert grid.accessible() == [(0, 0), (0, 2), (2, 0), (2, 2)]


def test_accessible_positions_hold_rolls():
    lines = GRID_DATA.splitlines()
    for row, col in PaperGrid(GRID_DATA).accessible():
        assert lines[row][col] == "@"


def test_accessible_is_row_major_order():
    positions = PaperGrid(GRID_DATA).accessible()
    assert positions == sorted(positions)


def test_removed_positions_disappear():
    grid = PaperGrid(GRID_DATA)
    first = grid.accessible()
    grid.remove(first)
    assert set(first).isdisjoint(grid.accessible())


def test_nothing_left_after_stable():
    grid = PaperGrid(GRID_DATA)
    removed = grid.remove_until_stable()
    assert grid.accessible() == []
    assert removed <= GRID_DATA.count("@")


def test_empty_grid():
    grid = PaperGrid("....\n....")
    assert grid.accessible() == []
    assert grid.remove_until_stable() == 0