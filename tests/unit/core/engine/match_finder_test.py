# -----------------------------------------------------------------------------
# sidediff - Dual Licensed Software
# Copyright (c) 2025 Adem Can
#
# This file is part of sidediff.
#
# sidediff is available under a dual-license:
#   1. AGPLv3 (Affero General Public License v3)
#      - See LICENSE.txt and LICENSE-AGPL.txt
#      - Online: https://www.gnu.org/licenses/agpl-3.0.html
#
#   2. Commercial License
#      - For proprietary or revenue-generating use,
#        including SaaS, embedding in closed-source software,
#        or avoiding AGPL obligations.
#      - See LICENSE.txt and COMMERCIAL-LICENSE.txt
#      - Contact: ademfcan@gmail.com
#
# By using this file, you agree to the terms of one of the two licenses above.
# -----------------------------------------------------------------------------

from sidediff.core.data.match import Match
from sidediff.core.engine.match_finder import build_line_index, find_matches


def test_build_line_index():
    index = build_line_index(["a", "b", "a"])
    assert index["a"] == [0, 2]
    assert index["b"] == [1]


def test_find_matches_localized_edit():
    before = ["a", "b", "c", "d"]
    after = ["a", "x", "c", "d"]
    assert find_matches(before, after) == [(0, 0, 1), (2, 2, 2)]


def test_find_matches_identical():
    lines = ["a", "b", "c"]
    assert find_matches(lines, lines) == [Match(0, 0, 3)]


def test_find_matches_nothing_in_common():
    assert find_matches(["a", "b"], ["c", "d"]) == []


def test_find_matches_empty_inputs():
    assert find_matches([], ["a"]) == []
    assert find_matches(["a"], []) == []


def test_find_matches_duplicates_claim_each_position_once():
    matches = find_matches(["x", "x", "x"], ["x"])
    assert matches == [Match(0, 0, 1)]


def test_find_matches_picks_first_unused_occurrence():
    before = ["a", "a"]
    after = ["a", "b", "a"]
    assert find_matches(before, after) == [Match(0, 0, 1), Match(1, 2, 1)]


def test_find_matches_can_cross():
    # the greedy search does not keep after positions monotonic
    assert find_matches(["a", "b"], ["b", "a"]) == [Match(0, 1, 1), Match(1, 0, 1)]


def test_matches_never_share_lines():
    before = ["x", "y", "x", "y", "z", "x"]
    after = ["y", "x", "y", "x", "x"]

    claimed_before = set()
    claimed_after = set()
    for m in find_matches(before, after):
        b_range = set(range(m.before_start, m.before_end))
        a_range = set(range(m.after_start, m.after_end))
        assert not (b_range & claimed_before)
        assert not (a_range & claimed_after)
        assert before[m.before_start : m.before_end] == after[m.after_start : m.after_end]
        claimed_before |= b_range
        claimed_after |= a_range
