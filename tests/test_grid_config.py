import unittest

from app.perfectgrid.layout.config import GridConfig
from app.perfectgrid.layout.errors import GridConfigError


class TestGridConfig(unittest.TestCase):
    def test_valid_config(self):
        config = GridConfig(available_width=1000, min_line_height=100, max_line_height=200, min_item_width=50, gap=10)
        self.assertEqual(config.gap, 10)

    def test_gap_defaults_to_zero(self):
        config = GridConfig(available_width=1000, min_line_height=100, max_line_height=200, min_item_width=50)
        self.assertEqual(config.gap, 0.0)

    def test_equal_bounds_are_allowed(self):
        GridConfig(available_width=50, min_line_height=200, max_line_height=200, min_item_width=50)

    def test_min_height_bigger_than_max_height(self):
        with self.assertRaises(GridConfigError) as ctx:
            GridConfig(available_width=1000, min_line_height=200, max_line_height=100, min_item_width=50, gap=10)
        self.assertEqual(ctx.exception.problems, ["Min height can not be bigger than max height"])

    def test_available_width_less_than_min_item_width(self):
        with self.assertRaises(GridConfigError) as ctx:
            GridConfig(available_width=40, min_line_height=100, max_line_height=200, min_item_width=50, gap=10)
        self.assertEqual(ctx.exception.problems, ["Available width can not be less than min item width"])

    def test_config_error_is_value_error(self):
        with self.assertRaises(ValueError):
            GridConfig(available_width=40, min_line_height=300, max_line_height=200, min_item_width=50)

    def test_problems_lists_every_violation(self):
        problems = GridConfig.problems(
            available_width=40,
            min_line_height=300,
            max_line_height=200,
            min_item_width=50,
        )
        self.assertEqual(len(problems), 2)
        self.assertEqual(
            GridConfig.problems(available_width=400, min_line_height=100, max_line_height=200, min_item_width=50),
            [],
        )

    def test_frozen(self):
        config = GridConfig(available_width=1000, min_line_height=100, max_line_height=200, min_item_width=50)
        with self.assertRaises(AttributeError):
            config.gap = 5


if __name__ == "__main__":
    unittest.main()
