"""Tests for the continuous scroll navigator."""

import math
import random

import pytest

from polaris.navigation.navigator import SCROLL_STEP, Direction, NavState, ScrollNavigator


class TestScrollNavigator:
    def test_starts_idle_at_zero(self):
        nav = ScrollNavigator(4)
        assert nav.position == 0.0
        assert nav.state == NavState.IDLE
        assert nav.tick() == 0.0

    @pytest.mark.parametrize("page_count", [2, 4, 7])
    def test_holding_down_lands_exactly_on_last_page(self, page_count):
        nav = ScrollNavigator(page_count)
        nav.press(Direction.DOWN)
        for _ in range(math.ceil((page_count - 1) / SCROLL_STEP)):
            nav.tick()
        assert nav.position == page_count - 1

        for _ in range(50):
            nav.tick()
        assert nav.position == page_count - 1
        assert nav.current_index == page_count - 1

    def test_holding_up_at_top_stays_at_zero(self):
        nav = ScrollNavigator(3)
        nav.press(Direction.UP)
        for _ in range(10):
            nav.tick()
        assert nav.position == 0.0

    def test_one_tick_moves_one_step(self):
        nav = ScrollNavigator(3)
        nav.press(Direction.DOWN)
        assert nav.tick() == pytest.approx(SCROLL_STEP)
        nav.release(Direction.DOWN)
        nav.press(Direction.UP)
        assert nav.tick() == 0.0

    def test_release_stops_movement(self):
        nav = ScrollNavigator(3)
        nav.press(Direction.DOWN)
        for _ in range(10):
            nav.tick()
        nav.release(Direction.DOWN)
        frozen = nav.position
        nav.tick()
        assert nav.position == frozen
        assert nav.state == NavState.IDLE

    def test_down_wins_when_both_held(self):
        nav = ScrollNavigator(3)
        nav.press(Direction.UP)
        nav.press(Direction.DOWN)
        assert nav.state == NavState.SCROLLING_DOWN
        assert nav.tick() > 0.0

    def test_position_never_leaves_range(self):
        rng = random.Random(42)
        nav = ScrollNavigator(5)
        for _ in range(5000):
            action = rng.random()
            direction = rng.choice([Direction.DOWN, Direction.UP])
            if action < 0.05:
                nav.press(direction)
            elif action < 0.1:
                nav.release(direction)
            nav.tick()
            assert 0.0 <= nav.position <= 4.0

    def test_current_index_is_floor(self):
        nav = ScrollNavigator(4)
        nav.press(Direction.DOWN)
        for _ in range(100):  # 1.5 pages
            nav.tick()
        assert nav.position == pytest.approx(1.5)
        assert nav.current_index == 1

    def test_reset_returns_to_zero_and_clears_keys(self):
        nav = ScrollNavigator(4)
        nav.press(Direction.DOWN)
        for _ in range(30):
            nav.tick()
        nav.reset(6)
        assert nav.position == 0.0
        assert nav.page_count == 6
        assert nav.state == NavState.IDLE
        assert not nav.is_held(Direction.DOWN)

    @pytest.mark.parametrize("page_count", [0, 1])
    def test_no_room_to_scroll(self, page_count):
        nav = ScrollNavigator(page_count)
        nav.press(Direction.DOWN)
        for _ in range(10):
            nav.tick()
        assert nav.position == 0.0

    def test_invalid_arguments(self):
        with pytest.raises(ValueError):
            ScrollNavigator(-1)
        with pytest.raises(ValueError):
            ScrollNavigator(3, step=0.0)


class TestHints:
    def test_page_label(self):
        nav = ScrollNavigator(4)
        assert nav.page_label == "1 / 4"
        assert ScrollNavigator(0).page_label == "0 / 0"

    def test_arrow_hints(self):
        nav = ScrollNavigator(4)
        assert not nav.shows_up_hint
        assert nav.shows_down_hint

        nav.press(Direction.DOWN)
        while nav.position < 3.0:
            nav.tick()
        assert nav.shows_up_hint
        assert not nav.shows_down_hint
