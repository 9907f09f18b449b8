"""
Tests for arithmetic helpers on Q
"""

import pytest

from arithmetic import Q, is_integer, mixed_parts, qstr, sign, split_whole, to_q


class TestQstr:
    """Exact decimal expansion"""

    def test_terminating(self) -> None:
        assert qstr(Q(1, 4)) == "0.25"
        assert qstr(Q(-7, 4)) == "-1.75"
        assert qstr(Q(5)) == "5"
        assert qstr(Q(0)) == "0"

    def test_repeating(self) -> None:
        assert qstr(Q(1, 3)) == "0.(3)"
        assert qstr(Q(1, 6)) == "0.1(6)"
        assert qstr(Q(-22, 7)) == "-3.(142857)"


class TestToQ:
    """to_q coercion"""

    def test_float_goes_through_str(self) -> None:
        assert to_q(0.1) == Q(1, 10)

    def test_passthrough_and_ints(self) -> None:
        q = Q(3, 4)
        assert to_q(q) is q
        assert to_q(7) == Q(7)
        assert to_q("0.75") == q

    def test_rejects_other_types(self) -> None:
        with pytest.raises(TypeError):
            to_q(True)
        with pytest.raises(TypeError):
            to_q([1])


class TestDecomposition:
    """split_whole / mixed_parts / sign / is_integer"""

    def test_split_whole_truncates_towards_zero(self) -> None:
        assert split_whole(Q(7, 4)) == (1, Q(3, 4))
        assert split_whole(Q(-7, 4)) == (-1, Q(-3, 4))
        assert split_whole(Q(-1, 2)) == (0, Q(-1, 2))

    def test_mixed_parts(self) -> None:
        assert mixed_parts(Q(-7, 4)) == (-1, 1, 3, 4)
        assert mixed_parts(Q(3, 4)) == (1, 0, 3, 4)
        assert mixed_parts(Q(0)) == (0, 0, 0, 1)

    def test_sign_and_is_integer(self) -> None:
        assert sign(Q(-1, 3)) == -1
        assert sign(Q(0)) == 0
        assert sign(Q(2)) == 1
        assert is_integer(Q(4, 2))
        assert not is_integer(Q(1, 2))


class TestQstrDigitLimit:
    """qstr with max_digits"""

    def test_long_cycle_is_cut_off(self) -> None:
        assert qstr(Q(1, 97), max_digits=8) == "0.01030927..."
        assert qstr(Q(-1, 97), max_digits=3) == "-0.010..."

    def test_short_forms_are_unaffected(self) -> None:
        assert qstr(Q(1, 4), max_digits=2) == "0.25"
        assert qstr(Q(1, 3), max_digits=1) == "0.(3)"
        assert qstr(Q(7), max_digits=0) == "7"
        assert qstr(Q(1, 8), max_digits=2) == "0.12..."

    def test_negative_limit_raises(self) -> None:
        with pytest.raises(ValueError):
            qstr(Q(1, 3), max_digits=-1)
