"""
Unit tests for GapBackfiller.
"""

import pytest
from pubsub import pub

from tagwm import topics
from tagwm.backfill import GapBackfiller
from tagwm.layouts import LayoutStack, MONOCLE, TILE
from tagwm.window_set import WindowSet

TAGS = [str(i) for i in range(1, 11)]


def fill(window_set, tag, *windows):
    for window in windows:
        window_set.insert(window, tag=tag)


@pytest.mark.unit
class TestGapBackfiller:
    """Test packing occupied tags into the lowest free slots."""

    @pytest.fixture
    def backfiller(self, registry):
        return GapBackfiller(registry)

    def test_packs_groups_low(self, backfiller, window_set):
        fill(window_set, "3", "a1", "a2")
        fill(window_set, "7", "b1")
        window_set.workspace("3").set_layouts(LayoutStack([MONOCLE, TILE], current=1))
        window_set.workspace("3").focused_window = "a1"
        window_set.workspace("7").set_layouts(LayoutStack([TILE, MONOCLE], current=1))

        moves = backfiller.backfill(window_set)

        assert moves == {"3": "2", "7": "3"}
        two, three = window_set.workspace("2"), window_set.workspace("3")
        assert two.windows == ["a1", "a2"]
        assert two.focused_window == "a1"
        assert two.layout_name == TILE
        assert three.windows == ["b1"]
        assert three.focused_window == "b1"
        assert three.layouts.layouts == [TILE, MONOCLE]
        assert three.layout_name == MONOCLE
        assert window_set.workspace("7").is_empty
        assert window_set.tag_for("b1") == "3"

    def test_is_idempotent(self, backfiller, window_set):
        fill(window_set, "4", "a")
        fill(window_set, "9", "b")

        backfiller.backfill(window_set)
        snapshot = {ws.tag: list(ws.windows) for ws in window_set.ordered_workspaces()}

        assert backfiller.backfill(window_set) == {}
        assert {
            ws.tag: list(ws.windows) for ws in window_set.ordered_workspaces()
        } == snapshot

    def test_pinned_tags_stay(self, backfiller, window_set):
        fill(window_set, "1", "editor")
        fill(window_set, "5", "a")

        moves = backfiller.backfill(window_set)

        assert moves == {"5": "2"}
        assert window_set.workspace("1").windows == ["editor"]

    def test_groups_are_never_merged(self, backfiller, window_set):
        fill(window_set, "3", "a")
        fill(window_set, "5", "b1", "b2")
        fill(window_set, "8", "c")

        backfiller.backfill(window_set)

        assert window_set.workspace("2").windows == ["a"]
        assert window_set.workspace("3").windows == ["b1", "b2"]
        assert window_set.workspace("4").windows == ["c"]

    def test_created_tags_move_down(self, backfiller, window_set):
        window_set.add_workspace("11")
        fill(window_set, "11", "late")
        for tag in TAGS[2:]:
            fill(window_set, tag, f"w{tag}")

        moves = backfiller.backfill(window_set)

        assert moves["11"] == "10"
        assert window_set.workspace("10").windows == ["late"]
        assert window_set.workspace("11").is_empty

    def test_current_screen_follows_its_group(self, backfiller, window_set):
        fill(window_set, "5", "a")
        window_set.focus_tag("5")

        backfiller.backfill(window_set)

        assert window_set.current_tag == "2"
        assert window_set.current_client() == "a"

    def test_other_screen_is_redirected(self, backfiller):
        window_set = WindowSet(TAGS, screens=2)
        fill(window_set, "4", "a1", "a2")
        window_set.workspace("4").focused_window = "a1"
        window_set.focus_screen(1)
        window_set.focus_tag("4")
        window_set.focus_screen(0)

        backfiller.backfill(window_set)

        assert window_set.visible_tags() == ["1", "2"]
        assert window_set.current_screen.index == 0
        assert window_set.workspace("2").focused_window == "a1"

    def test_screens_swap_when_target_is_visible(self, backfiller):
        window_set = WindowSet(TAGS, screens=2)
        fill(window_set, "4", "a")
        window_set.focus_tag("4")

        backfiller.backfill(window_set)

        assert window_set.visible_tags() == ["2", "4"]
        assert window_set.current_screen.index == 0
        assert window_set.current_client() == "a"

    def test_other_screen_keeps_group_that_took_current_tag(self, backfiller):
        window_set = WindowSet(TAGS, screens=2)
        window_set.focus_screen(1)
        window_set.focus_tag("4")
        window_set.focus_screen(0)
        window_set.focus_tag("2")
        fill(window_set, "4", "a")

        moves = backfiller.backfill(window_set)

        assert moves == {"4": "2"}
        assert window_set.screens[1].tag == "2"
        assert window_set.workspace("2").windows == ["a"]
        assert window_set.current_screen.index == 0

    def test_publishes_moves(self, backfiller, window_set):
        received = []

        def on_backfilled(moves):
            received.append(moves)

        pub.subscribe(on_backfilled, topics.TAGS_BACKFILLED)
        fill(window_set, "6", "a")

        backfiller.backfill(window_set)
        backfiller.backfill(window_set)

        assert received == [{"6": "2"}]
