import pytest

from dsabasics.stacks import LinkedStack, Stack, StackEmptyError, StackFullError, stock_span


@pytest.fixture(params=["array", "linked"])
def stack(request):
    return Stack() if request.param == "array" else LinkedStack()


def test_push_pop_peek_sequence(stack):
    for value in (5, 10, 20):
        stack.push(value)
    assert stack.pop() == 20
    assert len(stack) == 2
    assert stack.peek() == 10
    assert bool(stack) is True


def test_empty_stack_raises(stack):
    assert len(stack) == 0
    assert bool(stack) is False
    with pytest.raises(StackEmptyError):
        stack.pop()
    with pytest.raises(StackEmptyError):
        stack.peek()


def test_lifo_round_trip(stack):
    values = [3, 1, 4, 1, 5, 9, 2, 6]
    for value in values:
        stack.push(value)
    popped = [stack.pop() for _ in values]
    assert popped == values[::-1]
    assert not stack


def test_bounded_stack_overflow():
    stack = Stack(5)
    with pytest.raises(StackEmptyError):
        stack.pop()
    for value in range(5):
        stack.push(value)
    assert len(stack) == 5
    with pytest.raises(StackFullError):
        stack.push(99)
    assert stack.peek() == 4


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Stack(-1)


def test_stock_span_example():
    assert stock_span([100, 80, 60, 70, 60, 75, 85]) == [1, 1, 1, 2, 1, 4, 6]


def test_stock_span_empty():
    assert stock_span([]) == []


def test_stock_span_increasing_and_decreasing():
    rising = [1, 2, 3, 4, 5]
    assert stock_span(rising) == list(range(1, len(rising) + 1))
    falling = [9, 7, 5, 3]
    assert stock_span(falling) == [1] * len(falling)


@pytest.mark.parametrize("prices", [[5, 3, 3, 8, 1, 8, 2], [2, 2, 2], [10, 4, 5, 90, 120, 80]])
def test_stock_span_definition(prices):
    spans = stock_span(prices)
    assert len(spans) == len(prices)
    for i, span in enumerate(spans):
        assert 1 <= span <= i + 1
        assert all(p <= prices[i] for p in prices[i - span + 1 : i + 1])
        if span < i + 1:
            assert prices[i - span] > prices[i]