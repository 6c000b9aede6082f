import random
import unittest

from ..core.viewport_mapper import IndexKind, ViewportMapper
from ..core.window_manager import compute_window
from ..models.page_window import PageWindow

PAGE_SIZE = 10
TOTAL_PAGES = 10
WINDOW_SIZE = 4


class TestViewportMapper(unittest.TestCase):
    def setUp(self):
        self.mapper = ViewportMapper(
            page_size=PAGE_SIZE,
            total_pages=TOTAL_PAGES,
            window_size=WINDOW_SIZE,
            prefetch_threshold_pages=1,
        )

    def map(self, start, stop, window, *, current=None, max_page=None,
            kind=IndexKind.GLOBAL, pending=None, mapper=None):
        mapper = mapper or self.mapper
        return mapper.map_range(
            start,
            stop,
            window=window,
            current_page=current if current is not None else window.start_page,
            max_accessible_page=max_page if max_page is not None else window.start_page,
            materialized_count=len(window) * mapper.page_size,
            kind=kind,
            pending_page=pending,
        )

    # ------------------------------------------------------------------ #
    # index interpretation
    # ------------------------------------------------------------------ #

    def test_explicit_kind_is_kept(self):
        window = PageWindow(3, 6)
        for kind in (IndexKind.GLOBAL, IndexKind.RELATIVE):
            self.assertIs(self.mapper.resolve_kind(0, 5, kind, window, 40), kind)

    def test_auto_treats_indices_inside_materialized_list_as_relative(self):
        window = PageWindow(3, 6)
        self.assertIs(self.mapper.resolve_kind(0, 39, IndexKind.AUTO, window, 40), IndexKind.RELATIVE)

    def test_auto_treats_indices_past_materialized_list_as_global(self):
        window = PageWindow(3, 6)
        self.assertIs(self.mapper.resolve_kind(0, 40, IndexKind.AUTO, window, 40), IndexKind.GLOBAL)
        self.assertIs(self.mapper.resolve_kind(60, 65, IndexKind.AUTO, window, 40), IndexKind.GLOBAL)

    def test_relative_indices_are_offset_by_window_start(self):
        update = self.map(5, 12, PageWindow(3, 6), kind=IndexKind.RELATIVE)
        self.assertIs(update.kind, IndexKind.RELATIVE)
        self.assertEqual(update.top_page, 3)
        self.assertEqual(update.bottom_page, 4)

    def test_auto_resolves_and_reports_kind(self):
        update = self.map(5, 12, PageWindow(3, 6), kind=IndexKind.AUTO)
        self.assertIs(update.kind, IndexKind.RELATIVE)
        self.assertEqual(update.top_page, 3)

        update = self.map(60, 65, PageWindow(3, 6), kind=IndexKind.AUTO)
        self.assertIs(update.kind, IndexKind.GLOBAL)
        self.assertEqual(update.top_page, 7)

    # ------------------------------------------------------------------ #
    # jumping
    # ------------------------------------------------------------------ #

    def test_range_outside_window_jumps(self):
        update = self.map(80, 89, PageWindow(1, 4), current=1, max_page=1)

        self.assertTrue(update.jumped)
        self.assertTrue(update.window_changed)
        self.assertEqual(update.window, PageWindow(7, 10))
        self.assertEqual(update.current_page, 9)
        self.assertTrue(update.page_changed)
        self.assertEqual(update.max_accessible_page, 9)

    def test_range_straddling_window_edge_jumps(self):
        update = self.map(35, 45, PageWindow(1, 4), current=4, max_page=4)
        self.assertTrue(update.jumped)
        self.assertEqual(update.window, compute_window(4, TOTAL_PAGES, WINDOW_SIZE))

    def test_indices_beyond_dataset_clamp_to_last_page(self):
        update = self.map(500, 510, PageWindow(1, 4))
        self.assertEqual(update.top_page, TOTAL_PAGES)
        self.assertEqual(update.current_page, TOTAL_PAGES)
        self.assertEqual(update.max_accessible_page, TOTAL_PAGES)
        self.assertEqual(update.window, PageWindow(7, 10))

    # ------------------------------------------------------------------ #
    # sliding
    # ------------------------------------------------------------------ #

    def test_slides_back_near_top_edge(self):
        update = self.map(40, 49, PageWindow(5, 8), current=6, max_page=8)
        self.assertFalse(update.jumped)
        self.assertEqual(update.window, PageWindow(3, 6))
        self.assertEqual(update.current_page, 5)

    def test_slides_forward_near_bottom_edge(self):
        update = self.map(30, 39, PageWindow(1, 4), current=3, max_page=3)
        self.assertFalse(update.jumped)
        self.assertEqual(update.window, PageWindow(2, 5))
        self.assertEqual(update.current_page, 4)
        self.assertEqual(update.max_accessible_page, 4)

    def test_middle_of_window_does_not_move_it(self):
        update = self.map(30, 49, PageWindow(3, 6), current=4, max_page=6)
        self.assertFalse(update.window_changed)
        self.assertEqual(update.window, PageWindow(3, 6))
        self.assertFalse(update.page_changed)

    def test_window_at_dataset_edges_stays_put(self):
        update = self.map(0, 9, PageWindow(1, 4))
        self.assertFalse(update.window_changed)

        update = self.map(90, 99, PageWindow(7, 10), current=10, max_page=10)
        self.assertFalse(update.window_changed)

    def test_zero_threshold_only_moves_on_leaving_window(self):
        mapper = ViewportMapper(
            page_size=PAGE_SIZE,
            total_pages=TOTAL_PAGES,
            window_size=WINDOW_SIZE,
            prefetch_threshold_pages=0,
        )
        update = self.map(40, 49, PageWindow(5, 8), mapper=mapper)
        self.assertFalse(update.window_changed)
        update = self.map(70, 79, PageWindow(5, 8), mapper=mapper)
        self.assertFalse(update.window_changed)

    # ------------------------------------------------------------------ #
    # jump targets
    # ------------------------------------------------------------------ #

    def test_pending_jump_target_keeps_current_page_while_visible(self):
        update = self.map(40, 69, PageWindow(5, 8), current=6, max_page=6, pending=6)
        self.assertEqual(update.top_page, 5)
        self.assertEqual(update.current_page, 6)
        self.assertEqual(update.pending_page, 6)
        self.assertFalse(update.page_changed)

    def test_pending_jump_target_clears_once_scrolled_away(self):
        update = self.map(70, 79, PageWindow(5, 8), current=6, max_page=6, pending=6)
        self.assertEqual(update.current_page, 8)
        self.assertIsNone(update.pending_page)
        self.assertEqual(update.window, PageWindow(6, 9))

    # ------------------------------------------------------------------ #
    # edge cases
    # ------------------------------------------------------------------ #

    def test_negative_indices_clamp_to_zero(self):
        update = self.map(-5, -1, PageWindow(1, 4))
        self.assertEqual((update.top_page, update.bottom_page), (1, 1))

    def test_reversed_range_is_swapped(self):
        update = self.map(25, 5, PageWindow(1, 4))
        self.assertEqual((update.top_page, update.bottom_page), (1, 3))

    def test_empty_dataset_changes_nothing(self):
        mapper = ViewportMapper(page_size=PAGE_SIZE, total_pages=0, window_size=WINDOW_SIZE)
        update = self.map(0, 20, PageWindow.empty(), current=1, max_page=0, mapper=mapper)
        self.assertEqual(update.current_page, 1)
        self.assertEqual(update.max_accessible_page, 0)
        self.assertFalse(update.window_changed)
        self.assertFalse(update.page_changed)
        self.assertTrue(update.window.is_empty)

    def test_max_accessible_page_never_decreases(self):
        rng = random.Random(1234)
        total_items = PAGE_SIZE * TOTAL_PAGES
        window = compute_window(1, TOTAL_PAGES, WINDOW_SIZE)
        current, max_page, pending = 1, 1, None

        for _ in range(500):
            start = rng.randrange(-5, total_items + 20)
            stop = start + rng.randrange(0, 25)
            kind = rng.choice(list(IndexKind))
            update = self.map(start, stop, window, current=current, max_page=max_page,
                              kind=kind, pending=pending)

            self.assertGreaterEqual(update.max_accessible_page, max_page)
            self.assertLessEqual(update.max_accessible_page, TOTAL_PAGES)
            self.assertEqual(update.window.end_page - update.window.start_page + 1, WINDOW_SIZE)
            window, current = update.window, update.current_page
            max_page, pending = update.max_accessible_page, update.pending_page


if __name__ == "__main__":
    unittest.main()
