"""Tests for patterns and the pattern library."""

from lifecubes.core.engine import GenerationEngine
from lifecubes.core.grid import Grid
from lifecubes.core.patterns import Pattern, PatternLibrary


class TestPattern:
    """Test cases for the Pattern class."""

    def test_apply_to_grid(self):
        """Test placing a pattern with an offset."""
        grid = Grid(5)
        grid.set_cell(4, 4, True)
        glider = PatternLibrary().get_pattern("Glider")

        placed = glider.apply_to_grid(grid, 1, 1)

        assert placed == 5
        assert set(grid.alive_cells()) == {(1, 2), (2, 3), (3, 1), (3, 2), (3, 3)}

    def test_apply_skips_out_of_bounds(self):
        """Test cells outside the grid are dropped."""
        grid = Grid(5)
        block = PatternLibrary().get_pattern("Block")

        assert block.apply_to_grid(grid, 4, 4) == 1
        assert grid.alive_cells() == [(4, 4)]

    def test_bounding_box_and_size(self):
        """Test bounding box and size."""
        pattern = Pattern("Test", [(1, 2), (3, 5), (2, 4)])
        assert pattern.get_bounding_box() == (1, 2, 3, 5)
        assert pattern.get_size() == (3, 4)

        assert Pattern("Empty", []).get_bounding_box() == (0, 0, 0, 0)

    def test_normalize(self):
        """Test normalization moves the pattern to the origin."""
        pattern = Pattern("Test", [(3, 4), (4, 5)], "shifted").normalize()
        assert pattern.cells == [(0, 0), (1, 1)]
        assert pattern.description == "shifted"

    def test_centered_offset(self):
        """Test centering on a grid."""
        block = PatternLibrary().get_pattern("Block")
        assert block.centered_offset(Grid(6)) == (2, 2)
        assert block.centered_offset(Grid(1)) == (0, 0)

    def test_dict_conversion(self):
        """Test dictionary round trip keeps tuples."""
        pattern = Pattern("Test", [(0, 1), (2, 3)], "desc")
        data = pattern.to_dict()
        assert data == {"name": "Test", "cells": [[0, 1], [2, 3]], "description": "desc"}

        restored = Pattern.from_dict(data)
        assert restored.cells == [(0, 1), (2, 3)]
        assert restored.name == "Test"

    def test_from_grid(self):
        """Test capturing a pattern from a grid."""
        grid = Grid(4)
        grid.set_cell(1, 1, True)
        grid.set_cell(2, 3, True)

        pattern = Pattern.from_grid(grid, "Captured")
        assert pattern.cells == [(1, 1), (2, 3)]


class TestPatternLibrary:
    """Test cases for the PatternLibrary class."""

    def test_builtins(self):
        """Test built-in patterns are present."""
        library = PatternLibrary()
        for name in ["Block", "Blinker", "Glider", "R-pentomino"]:
            assert library.get_pattern(name) is not None

    def test_case_insensitive_lookup(self):
        """Test lookups ignore case."""
        library = PatternLibrary()
        assert library.get_pattern("glider") is library.get_pattern("Glider")
        assert library.get_pattern("missing") is None

    def test_categories(self):
        """Test patterns are grouped by category."""
        categories = PatternLibrary().get_patterns_by_category()
        assert "Block" in categories["Still Lifes"]
        assert "Glider" in categories["Spaceships"]

    def test_add_pattern(self):
        """Test adding a custom pattern."""
        library = PatternLibrary()
        library.add_pattern(Pattern("Dot", [(0, 0)]))
        assert "Dot" in library.list_patterns()
        assert "Dot" in library.get_patterns_by_category()["Custom"]

    def test_still_lifes_are_stable(self):
        """Test every still life survives a tick unchanged."""
        library = PatternLibrary()
        for name in library.get_patterns_by_category()["Still Lifes"]:
            grid = Grid(8)
            library.get_pattern(name).apply_to_grid(grid, 2, 2)
            before = grid.alive_cells()

            GenerationEngine(grid).tick()
            assert grid.alive_cells() == before, name
