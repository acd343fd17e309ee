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

import pytest

from sidediff.core.data.alignment import Alignment
from sidediff.core.data.span import Span
from sidediff.core.exceptions import ValidationError
from sidediff.core.navigation.discard import render_lines, revert_region


def test_revert_substitution():
    base = ["a", "b", "X", "c"]
    current = ["a", "b", "Y", "Z", "c"]

    result = revert_region(base, current, Alignment(Span(2, 3), Span(2, 4), True))

    assert result == base


def test_revert_insertion_removes_lines():
    base = ["a", "c"]
    current = ["a", "b", "c"]

    result = revert_region(base, current, Alignment(Span(1, 1), Span(1, 2), True))

    assert result == ["a", "c"]


def test_revert_deletion_restores_lines():
    base = ["a", "b", "c"]
    current = ["a", "c"]

    result = revert_region(base, current, Alignment(Span(1, 2), Span(1, 1), True))

    assert result == ["a", "b", "c"]


def test_revert_keeps_other_regions():
    base = ["1", "x", "3", "y", "5"]
    current = ["1", "X", "3", "Y", "5"]

    result = revert_region(base, current, Alignment(Span(3, 4), Span(3, 4), True))

    assert result == ["1", "X", "3", "y", "5"]


def test_revert_out_of_range_raises():
    with pytest.raises(ValidationError):
        revert_region(["a"], ["a"], Alignment(Span(0, 1), Span(0, 3), True))

    with pytest.raises(ValidationError):
        revert_region(["a"], ["a", "b"], Alignment(Span(0, 4), Span(0, 1), True))


def test_render_lines():
    assert render_lines(["a", "b"]) == "a\nb\n"
    assert render_lines(["a", "b"], trailing_newline=False) == "a\nb"
    assert render_lines([]) == ""
