import unittest
from itertools import product
from math import prod

from gridvec import GridVec, DenseGrid, Coordinate, coordinate
from gridvec.errors import DimensionMismatchError, OffsetOutOfRangeError, CoordinateOutOfRangeError
from utils import backends, row_major_coords

class TestDenseGrid(unittest.TestCase):

    def setUp(self):
        self.gridvec = [GridVec(backend) for backend in backends]
        self.extents = [(), (5,), (3, 2), (4, 3, 2), (0, 3), (2, 0, 4)]
        # extents whose stride table maps every valid coordinate into the storage
        self.closed_extents = [(), (5,), (3, 3), (2, 2, 2)]

    def test_construction(self):
        for gv, extents in product(self.gridvec, self.extents):
            grid = gv.grid(extents)
            self.assertEqual(grid.extents, extents)
            self.assertEqual(grid.ndims, len(extents))
            self.assertEqual(len(grid.strides), len(extents))
            self.assertEqual(grid.size, prod(extents))
            self.assertEqual(len(grid), prod(extents))
            self.assertEqual(grid.storage.shape, (prod(extents),))
            if len(extents) > 0:
                self.assertEqual(grid.strides[-1], 1)

        for gv in self.gridvec:
            self.assertRaises(ValueError, gv.grid, [-1])
            self.assertRaises(ValueError, gv.grid, [2, 1.5])

    def test_zero_dimensional(self):
        for gv in self.gridvec:
            grid = gv.grid([])
            self.assertEqual(grid.size, 1)
            self.assertEqual(grid.strides, ())
            self.assertEqual(grid.get_by_offset(0), 0)
            self.assertEqual(grid.offset_of(Coordinate([])), 0)
            grid[()] = 4
            self.assertEqual(grid.get_by_coordinate(gv.zeros(0)), 4)

    def test_default_filled(self):
        for gv, extents in product(self.gridvec, self.extents):
            grid = gv.grid(extents)
            for offset in range(grid.size):
                self.assertEqual(grid.get_by_offset(offset), 0)
            grid = gv.grid(extents, dtype=gv.namespace.int32)
            self.assertEqual(grid.dtype, gv.namespace.int32)
            self.assertTrue(all(grid[offset] == 0 for offset in range(grid.size)))

    def test_offset_of(self):
        for gv in self.gridvec:
            grid = gv.grid([3, 2])
            self.assertEqual(grid.strides, (3, 1))
            self.assertEqual(grid.offset_of(gv.coordinate(2, 1)), 7)
            self.assertEqual(grid.offset_of(gv.coordinate(1, 1)), 4)

            grid = gv.grid([4, 3, 2])
            self.assertEqual(grid.strides, (12, 4, 1))
            self.assertEqual(grid.offset_of(gv.coordinate(3, 2, 1)), 45)
            self.assertEqual(grid.offset_of(gv.coordinate(1, 1, 1)), 17)

            # no range checking
            self.assertEqual(grid.offset_of(gv.coordinate(-1, 0, 0)), -12)
            self.assertRaises(DimensionMismatchError, grid.offset_of, gv.coordinate(1, 1))

    def test_offsets_of(self):
        for (xp, gv), extents in product(zip(backends, self.gridvec), self.extents[1:4]):
            grid = gv.grid(extents)
            coords = row_major_coords(extents)
            arr = xp.asarray([[c[i] for c in coords] for i in range(len(extents))])
            ref = xp.asarray([grid.offset_of(Coordinate(c)) for c in coords])
            self.assertTrue(xp.all(grid.offsets_of(arr) == ref))

    def test_get_by_offset_out_of_range(self):
        for gv, extents in product(self.gridvec, self.extents):
            grid = gv.grid(extents)
            for offset in [-1, -grid.size-1, grid.size, grid.size+7]:
                self.assertRaises(OffsetOutOfRangeError, grid.get_by_offset, offset)
                self.assertRaises(OffsetOutOfRangeError, grid.set_by_offset, offset, 1)
                self.assertRaises(IndexError, grid.__getitem__, offset)
            self.assertRaises(TypeError, grid.get_by_offset, 1.0)
            self.assertRaises(TypeError, grid.get_by_offset, True)

    def test_set_by_offset(self):
        for gv in self.gridvec:
            grid = gv.grid([4, 3, 2])
            for offset in range(grid.size):
                grid.set_by_offset(offset, offset)
            for offset in range(grid.size):
                self.assertEqual(grid.get_by_offset(offset), offset)
                self.assertEqual(grid.storage[offset], offset)

    def test_coordinate_access(self):
        for gv, extents in product(self.gridvec, self.closed_extents):
            grid = gv.grid(extents)
            for i, coord in enumerate(grid.coordinates()):
                grid.set_by_coordinate(coord, i+1)
            for i, coord in enumerate(grid.coordinates()):
                self.assertEqual(grid.get_by_coordinate(coord), i+1)
                self.assertEqual(grid[coord], i+1)
                self.assertEqual(grid[tuple(coord)], i+1)
                self.assertEqual(grid.get_by_offset(grid.offset_of(coord)), i+1)

    def test_coordinates(self):
        for gv, extents in product(self.gridvec, self.extents):
            grid = gv.grid(extents)
            coords = list(grid.coordinates())
            self.assertEqual(coords, [Coordinate(c) for c in row_major_coords(extents)])
            self.assertEqual(len(coords), grid.size)

    def test_coordinate_out_of_range(self):
        for gv in self.gridvec:
            grid = gv.grid([3, 3])
            for coord in [(-1, 0), (0, -1), (3, 0), (0, 3), (5, 5)]:
                self.assertRaises(CoordinateOutOfRangeError, grid.get_by_coordinate, Coordinate(coord))
                self.assertRaises(CoordinateOutOfRangeError, grid.set_by_coordinate, Coordinate(coord), 1)
            self.assertRaises(DimensionMismatchError, grid.get_by_coordinate, gv.coordinate(1))

            # the raw storage bounds still apply without coordinate checking
            with gv.options(check_coordinates=False):
                self.assertRaises(OffsetOutOfRangeError, grid.get_by_coordinate, gv.coordinate(0, -1))
                self.assertRaises(OffsetOutOfRangeError, grid.get_by_coordinate, gv.coordinate(3, 0))
                grid.set_by_offset(3, 9)
                self.assertEqual(grid.get_by_coordinate(gv.coordinate(0, 3)), 9)
            self.assertRaises(CoordinateOutOfRangeError, grid.get_by_coordinate, gv.coordinate(0, 3))

    def test_non_integer_components(self):
        for gv in self.gridvec:
            grid = gv.grid([3, 3])
            self.assertRaises(TypeError, grid.offset_of, gv.coordinate(1.9, 0))
            self.assertRaises(TypeError, grid.get_by_coordinate, gv.coordinate(1.9, 0))
            with gv.options(check_coordinates=False):
                self.assertRaises(TypeError, grid.get_by_coordinate, gv.coordinate(0.5, 0.7))
                self.assertRaises(TypeError, grid.set_by_coordinate, gv.coordinate(0.5, 0.7), 1)
            arr = gv.namespace.asarray([[0.5], [0.7]])
            self.assertRaises(ValueError, grid.offsets_of, arr)

    def test_asymmetric_extents(self):
        for gv in self.gridvec:
            # (0, 2) and (1, 0) are both within their axis extents and share offset 2
            grid = gv.grid([2, 3])
            self.assertEqual(grid.strides, (2, 1))
            self.assertEqual(grid.offset_of(gv.coordinate(0, 2)), 2)
            self.assertEqual(grid.offset_of(gv.coordinate(1, 0)), 2)
            grid[0, 2] = 5
            self.assertEqual(grid[1, 0], 5)
            self.assertEqual(grid.get_by_offset(2), 5)

            # (2, 1) is within its axis extents but maps past the storage
            grid = gv.grid([3, 2])
            self.assertEqual(grid.offset_of(gv.coordinate(2, 1)), 7)
            self.assertRaises(OffsetOutOfRangeError, grid.__getitem__, (2, 1))
            self.assertRaises(OffsetOutOfRangeError, grid.get_by_coordinate, gv.coordinate(2, 1))
            self.assertRaises(OffsetOutOfRangeError, grid.set_by_coordinate, gv.coordinate(2, 1), 1)

    def test_item_access(self):
        for gv in self.gridvec:
            grid = gv.grid([2, 2])
            grid[3] = 5
            grid[0, 1] = 6
            grid[gv.coordinate(1, 0)] = 7
            self.assertEqual(grid[3], 5)
            self.assertEqual(grid.get_by_offset(1), 6)
            self.assertEqual(grid.get_by_offset(2), 7)
            self.assertRaises(TypeError, grid.__getitem__, "a")
            self.assertRaises(TypeError, grid.__getitem__, 1.0)
            self.assertRaises(TypeError, grid.__setitem__, [0, 1], 1)

    def test_fill(self):
        for gv, extents in product(self.gridvec, self.extents):
            grid = gv.grid(extents)
            grid.fill(2.5)
            self.assertTrue(all(grid[offset] == 2.5 for offset in range(grid.size)))

    def test_direct_construction(self):
        for xp in backends:
            grid = DenseGrid(xp, [2, 3])
            self.assertEqual(grid.namespace, xp)
            self.assertEqual(grid.size, 6)
            self.assertIn("extents=[2, 3]", repr(grid))

    def test_owned_storage(self):
        for gv in self.gridvec:
            grid1 = gv.grid([2, 2])
            grid2 = gv.grid([2, 2])
            grid1[coordinate(1, 1)] = 1
            self.assertEqual(grid2[coordinate(1, 1)], 0)

if __name__ == '__main__':
    unittest.main()
