import pytest

from term_gif.geometry import Size
from term_gif.grid import DEFAULT, Cell, CellBuffer


def test_cell_defaults():
    assert Cell() == Cell(" ", DEFAULT, DEFAULT)
    assert DEFAULT == 0


class TestCellBuffer:
    def test_blank(self):
        grid = CellBuffer(3, 2)
        assert len(grid.cells) == 6
        assert all(cell == Cell() for cell in grid.cells)

    def test_dimensions(self):
        grid = CellBuffer(3, 2)
        assert (grid.width, grid.height) == (3, 2)
        assert grid.size == Size(3, 2)

    @pytest.mark.parametrize("size", [(-1, 1), (1, -1)])
    def test_negative(self, size):
        with pytest.raises(ValueError):
            CellBuffer(*size)

    @pytest.mark.parametrize("size", [(1.0, 1), (1, "1")])
    def test_type(self, size):
        with pytest.raises(TypeError):
            CellBuffer(*size)

    def test_getitem(self):
        grid = CellBuffer(3, 2)
        assert grid[2, 1] is grid.cells[2 + 1 * 3]
        assert grid[0, 0] is grid.cells[0]

    @pytest.mark.parametrize("position", [(3, 0), (0, 2), (-1, 0)])
    def test_getitem_out_of_range(self, position):
        with pytest.raises(IndexError):
            CellBuffer(3, 2)[position]

    def test_clear(self):
        grid = CellBuffer(2, 2)
        grid[1, 1].fg = 9
        grid.clear()
        assert all(cell == Cell() for cell in grid.cells)
        grid.clear("#", 1, 2)
        assert all(cell == Cell("#", 1, 2) for cell in grid.cells)

    def test_resize_same_size_keeps_contents(self):
        grid = CellBuffer(2, 2)
        cells = grid.cells
        grid[0, 0].ch = "x"
        grid.resize(2, 2)
        assert grid.cells is cells
        assert grid[0, 0].ch == "x"

    def test_resize_new_size_discards_contents(self):
        grid = CellBuffer(2, 2)
        grid[0, 0].ch = "x"
        grid.resize(3, 1)
        assert grid.size == (3, 1)
        assert len(grid.cells) == 3
        assert all(cell == Cell() for cell in grid.cells)

    def test_rows(self):
        grid = CellBuffer(2, 3)
        rows = list(grid.rows())
        assert len(rows) == 3
        assert all(len(row) == 2 for row in rows)
        assert rows[2][1] is grid[1, 2]

    def test_rows_zero_width(self):
        assert list(CellBuffer(0, 2).rows()) == [[], []]
