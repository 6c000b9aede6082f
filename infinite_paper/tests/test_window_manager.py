import unittest

from ..core.window_manager import clamp_page, compute_window, page_from_index
from ..models.page_window import PageWindow


class TestComputeWindow(unittest.TestCase):
    def test_centers_on_target(self):
        self.assertEqual(compute_window(5, 20, 4), PageWindow(3, 6))

    def test_shifts_at_start_of_dataset(self):
        self.assertEqual(compute_window(1, 20, 10), PageWindow(1, 10))

    def test_shifts_at_end_of_dataset(self):
        self.assertEqual(compute_window(20, 20, 10), PageWindow(11, 20))

    def test_small_dataset_is_fully_covered(self):
        self.assertEqual(compute_window(3, 4, 10), PageWindow(1, 4))

    def test_empty_dataset_yields_empty_window(self):
        window = compute_window(1, 0, 10)
        self.assertTrue(window.is_empty)
        self.assertEqual(len(window), 0)
        self.assertEqual(list(window), [])
        self.assertNotIn(1, window)

    def test_window_size_below_one_is_treated_as_one(self):
        self.assertEqual(compute_window(5, 10, 0), PageWindow(5, 5))

    def test_window_shape_holds_for_all_small_inputs(self):
        """Windows are contiguous, in range, bounded and contain the target"""
        for total in range(1, 16):
            for window_size in range(1, 13):
                for target in range(-2, total + 3):
                    with self.subTest(total=total, window_size=window_size, target=target):
                        window = compute_window(target, total, window_size)
                        self.assertGreaterEqual(window.start_page, 1)
                        self.assertLessEqual(window.end_page, total)
                        self.assertLessEqual(window.start_page, window.end_page)
                        self.assertEqual(len(window), min(window_size, total))
                        if 1 <= target <= total:
                            self.assertIn(target, window)


class TestPageHelpers(unittest.TestCase):
    def test_page_from_index(self):
        self.assertEqual(page_from_index(0, 10), 1)
        self.assertEqual(page_from_index(9, 10), 1)
        self.assertEqual(page_from_index(10, 10), 2)

    def test_clamp_page(self):
        self.assertEqual(clamp_page(0, 5), 1)
        self.assertEqual(clamp_page(9, 5), 5)
        self.assertEqual(clamp_page(3, 5), 3)
        self.assertEqual(clamp_page(3, 0), 1)
        self.assertEqual(clamp_page(-4, 5), 1)

    def test_clamp_page_maps_nan_to_first_page(self):
        self.assertEqual(clamp_page(float("nan"), 5), 1)
        self.assertEqual(clamp_page(4.0, 5), 4)

    def test_window_offset(self):
        self.assertEqual(PageWindow(3, 4).offset(10), 20)
        self.assertEqual(PageWindow(1, 4).offset(10), 0)


if __name__ == "__main__":
    unittest.main()
