"""
todotree Test Suite - Rendering
================================
Tests for render, summarize and the visibility rules behind them.

Usage:
    python -m pytest tests/test_rendering.py -v
"""

from todotree.domain.item import (
    ItemStatus,
    PrintWhich,
    StatusSummary,
    render,
    summarize,
    walk_visible,
)
from todotree.domain.item.rendering import strike_through
from tests.conftest import make_item


# ─────────────────────────────────────────────
#  Plain output
# ─────────────────────────────────────────────


class TestPlainRender:
    def test_default_hides_hidden_subtree(self, items):
        assert render(items, plain=True) == "\n".join(
            [
                "0. [ ] Groceries",
                "  0. [x] Milk",
                "  1. [ ] Eggs",
                "    0. [-] Free range",
                "2. [x] Laundry",
            ]
        )

    def test_show_hidden(self, items):
        lines = render(items, plain=True, show_hidden=True).splitlines()
        assert "1. [ ] Secret (hidden)" in lines
        assert "  0. [ ] Visible child" in lines
        assert len(lines) == 7

    def test_depth_limit_zero(self, items):
        assert render(items, plain=True, depth_limit=0) == "0. [ ] Groceries\n2. [x] Laundry"

    def test_depth_limit_keeps_ancestors(self, items):
        lines = render(items, plain=True, depth_limit=1).splitlines()
        assert "  1. [ ] Eggs" in lines
        assert all("Free range" not in line for line in lines)

    def test_filter_complete_keeps_nested_matches(self, items):
        assert render(items, PrintWhich.COMPLETE, plain=True) == "  0. [x] Milk\n2. [x] Laundry"

    def test_filter_incomplete(self, items):
        assert render(items, PrintWhich.INCOMPLETE, plain=True) == "0. [ ] Groceries\n  1. [ ] Eggs"

    def test_filter_descends_through_skipped_parent(self, items):
        assert render(items, PrintWhich.DISABLED, plain=True) == "    0. [-] Free range"

    def test_hidden_child_of_visible_parent(self):
        items = [make_item("A", children=[make_item("B", hidden=True, children=[make_item("C")])])]
        assert render(items, plain=True) == "0. [ ] A"

    def test_empty(self):
        assert render([]) == ""

    def test_render_does_not_mutate(self, items):
        before = [item.model_dump() for item in items]
        render(items, show_hidden=True)
        summarize(items)
        assert [item.model_dump() for item in items] == before


# ─────────────────────────────────────────────
#  Decorated output
# ─────────────────────────────────────────────


class TestDecoratedRender:
    def test_glyphs(self, items):
        lines = render(items).splitlines()
        assert lines[0] == "0. ☐ Groceries"
        assert lines[1] == "  0. ☑ Milk"

    def test_disabled_is_struck_through(self, items):
        lines = render(items).splitlines()
        assert lines[3] == f"    0. ☒ {strike_through('Free range')}"

    def test_strike_through(self):
        assert strike_through("ab") == "a\u0336b\u0336"


# ─────────────────────────────────────────────
#  Visibility properties
# ─────────────────────────────────────────────


class TestVisibility:
    def test_no_hidden_ancestor_is_emitted(self, items):
        for visit in walk_visible(items):
            node_list = items
            for index in visit.coordinate.indices:
                node = node_list[index]
                assert not node.hidden
                node_list = node.children

    def test_depth_never_exceeds_limit(self, items):
        for limit in range(3):
            assert all(v.depth <= limit for v in walk_visible(items, depth_limit=limit, show_hidden=True))


# ─────────────────────────────────────────────
#  Status summary
# ─────────────────────────────────────────────


class TestSummary:
    def test_counts_visible_items(self, items):
        summary = summarize(items)
        assert summary == StatusSummary(complete=2, incomplete=2, disabled=1)
        assert summary.total == 5

    def test_counts_hidden_when_shown(self, items):
        summary = summarize(items, show_hidden=True)
        assert summary.incomplete == 4
        assert summary.total == 7

    def test_counts_follow_filter(self, items):
        summary = summarize(items, PrintWhich.COMPLETE)
        assert (summary.complete, summary.incomplete, summary.disabled) == (2, 0, 0)

    def test_total_matches_rendered_lines(self, items):
        for which in PrintWhich:
            rendered = render(items, which, depth_limit=1)
            lines = rendered.splitlines() if rendered else []
            assert summarize(items, which, depth_limit=1).total == len(lines)

    def test_str(self):
        summary = StatusSummary(complete=1, incomplete=2, disabled=0)
        assert str(summary) == "Complete: 1 | Incomplete: 2 | Disabled: 0 | Total: 3"

    def test_every_status_present(self):
        assert set(StatusSummary().model_dump()) == {s.value for s in ItemStatus}
