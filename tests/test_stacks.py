import pytest

from pushswap.stacks import OPERATIONS, Stacks, to_ranks


def test_to_ranks_is_permutation_preserving_order():
    values = [40, -7, 13, 2147483647, -2147483648]
    ranks = to_ranks(values)
    assert sorted(ranks) == list(range(len(values)))
    for i, vi in enumerate(values):
        for j, vj in enumerate(values):
            assert (vi < vj) == (ranks[i] < ranks[j])


def test_to_ranks_of_sorted_input():
    assert to_ranks([5, 6, 7]) == [0, 1, 2]


def test_initial_state():
    s = Stacks([3, 1, 2])
    assert s.stack("a") == (3, 1, 2)
    assert s.stack("b") == ()
    assert s.size("a") == 3
    assert s.size("b") == 0


def test_swap():
    s = Stacks([1, 2, 3])
    s.swap("a")
    assert s.stack("a") == (2, 1, 3)


def test_swap_single_element_is_noop():
    s = Stacks([7])
    s.swap("a")
    s.swap("b")
    assert s.stack("a") == (7,)
    assert s.stack("b") == ()


def test_push_moves_top():
    s = Stacks([1, 2, 3])
    s.push("b")
    s.push("b")
    assert s.stack("a") == (3,)
    assert s.stack("b") == (2, 1)
    s.push("a")
    assert s.stack("a") == (2, 3)
    assert s.stack("b") == (1,)


def test_push_from_empty_is_noop():
    s = Stacks([1, 2])
    s.push("a")
    assert s.stack("a") == (1, 2)
    assert s.stack("b") == ()


def test_rotate_and_reverse_rotate():
    s = Stacks([1, 2, 3, 4])
    s.rotate("a")
    assert s.stack("a") == (2, 3, 4, 1)
    s.reverse_rotate("a")
    assert s.stack("a") == (1, 2, 3, 4)
    s.reverse_rotate("a")
    assert s.stack("a") == (4, 1, 2, 3)


def test_double_operations_act_on_both():
    s = Stacks([1, 2, 3, 4, 5, 6])
    for _ in range(3):
        s.push("b")
    assert s.stack("b") == (3, 2, 1)
    s.ss()
    assert s.stack("a") == (5, 4, 6)
    assert s.stack("b") == (2, 3, 1)
    s.rr()
    assert s.stack("a") == (4, 6, 5)
    assert s.stack("b") == (3, 1, 2)
    s.rrr()
    assert s.stack("a") == (5, 4, 6)
    assert s.stack("b") == (2, 3, 1)


@pytest.mark.parametrize("operation", OPERATIONS)
def test_apply_preserves_elements(operation):
    values = [4, 0, 3, 1, 2]
    s = Stacks(values)
    s.apply("pb")
    s.apply("pb")
    s.apply(operation)
    assert sorted(s.stack("a") + s.stack("b")) == sorted(values)


def test_apply_matches_methods():
    a = Stacks([1, 2, 3])
    b = Stacks([1, 2, 3])
    a.apply("pb")
    a.apply("rra")
    b.push("b")
    b.reverse_rotate("a")
    assert a.stack("a") == b.stack("a")
    assert a.stack("b") == b.stack("b")


def test_apply_unknown_operation():
    s = Stacks([1, 2])
    with pytest.raises(ValueError):
        s.apply("xx")


def test_unknown_stack_name():
    s = Stacks([1, 2])
    with pytest.raises(ValueError):
        s.swap("c")