from queens.components.cell_marker import MarkerState
from queens.constants import REGION_COLORS, REGION_FILL_ALPHA
from queens.systems.render import RenderSystem, blend_over_white
from tests.helpers import PALETTE, DummyWindow, column_regions, make_session, place_queen


def _render(regions=None):
    bus, world, board = make_session(regions=regions)
    return board, RenderSystem(world, bus, DummyWindow())


def test_blend_over_white_endpoints():
    assert blend_over_white((10, 20, 30), 0) == (255, 255, 255)
    assert blend_over_white((10, 20, 30), 255) == (10, 20, 30)


def test_blend_over_white_clamps_alpha():
    assert blend_over_white((0, 0, 0), -40) == (255, 255, 255)
    assert blend_over_white((0, 0, 0), 400) == (0, 0, 0)
    assert blend_over_white((0, 0, 0), 51) == (204, 204, 204)


def test_layout_fills_cells_with_faded_region_color():
    _, render = _render(column_regions())
    layout = render.build_cell_layout()
    assert len(layout) == 64
    for col in (0, 7):
        expected = blend_over_white(REGION_COLORS[PALETTE[col]], REGION_FILL_ALPHA)
        assert layout[(3, col)]['fill'] == expected
    assert render.last_cell_layout is layout


def test_layout_tracks_toggles():
    board, render = _render(column_regions())
    place_queen(board, 0, 0)
    place_queen(board, 1, 1)
    layout = render.build_cell_layout()
    assert layout[(0, 0)]['state'] == MarkerState.QUEEN
    assert layout[(0, 0)]['illegal'] and layout[(1, 1)]['illegal']
    board.toggle_cell(1, 1)
    layout = render.build_cell_layout()
    assert layout[(1, 1)]['state'] == MarkerState.EMPTY
    assert not any(cell['illegal'] for cell in layout.values())


def test_layout_flags_conflicts_created_by_new_regions():
    board, render = _render(column_regions())
    place_queen(board, 0, 0)
    place_queen(board, 2, 7)
    assert not any(cell['illegal'] for cell in render.build_cell_layout().values())
    regions = column_regions()
    for row in regions:
        row[7] = regions[0][0]
    board.set_regions(regions)
    layout = render.build_cell_layout()
    assert {pos for pos, cell in layout.items() if cell['illegal']} == {(0, 0), (2, 7)}
