"""Problems solved with stacks and monotonic stacks."""

from collections.abc import Iterable, Sequence

__all__ = [
    "build_array",
    "eval_rpn",
    "exclusive_time",
    "final_prices",
    "daily_temperatures",
    "largest_rectangle_area",
]


def build_array(target: Sequence[int], n: int) -> list[str]:
    """Return the Push/Pop operations that build the ascending ``target`` from 1..n.

    Raises IndexError when ``target`` is empty.
    """
    if not target:
        raise IndexError("target must not be empty")
    operations: list[str] = []
    remaining = iter(target)
    wanted = next(remaining)
    for value in range(1, n + 1):
        operations.append("Push")
        if value < wanted:
            operations.append("Pop")
            continue
        try:
            wanted = next(remaining)
        except StopIteration:
            break
    return operations


def _truncating_divide(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_OPERATORS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _truncating_divide,
}


def eval_rpn(tokens: Iterable[str]) -> int:
    """Evaluate an expression in reverse Polish notation; division truncates toward zero.

    Raises IndexError on a malformed expression and ZeroDivisionError on division by zero.
    """
    stack: list[int] = []
    for token in tokens:
        operator = _OPERATORS.get(token)
        if operator is None:
            stack.append(int(token))
            continue
        if len(stack) < 2:
            raise IndexError(f"operator {token!r} needs two operands")
        right = stack.pop()
        left = stack.pop()
        stack.append(operator(left, right))
    return stack[0]


def exclusive_time(n: int, logs: Iterable[str]) -> list[int]:
    """Return each function's exclusive running time from ``id:start|end:time`` logs."""
    totals = [0] * n
    calls: list[list[int]] = []
    for entry in logs:
        ident_text, op, time_text = entry.split(":")
        ident, time = int(ident_text), int(time_text)
        if op == "start":
            if calls:
                running = calls[-1]
                totals[running[0]] += time - running[1]
                running[1] = time
            calls.append([ident, time])
        else:
            _, started = calls.pop()
            totals[ident] += time - started + 1
            if calls:
                calls[-1][1] = time + 1
    return totals


def final_prices(prices: Sequence[int]) -> list[int]:
    """Apply to each price the discount of the next price that is not greater."""
    result = [0] * len(prices)
    stack: list[int] = []
    for index in reversed(range(len(prices))):
        price = prices[index]
        while stack and prices[stack[-1]] > price:
            stack.pop()
        result[index] = price - prices[stack[-1]] if stack else price
        stack.append(index)
    return result


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """For each day, return how many days until a warmer one, or 0 if none."""
    result = [0] * len(temperatures)
    stack: list[int] = []
    for index in reversed(range(len(temperatures))):
        while stack and temperatures[stack[-1]] <= temperatures[index]:
            stack.pop()
        result[index] = stack[-1] - index if stack else 0
        stack.append(index)
    return result


def _nearest_lower(heights: Sequence[int], indices: Iterable[int], default: int) -> dict[int, int]:
    bounds: dict[int, int] = {}
    stack: list[int] = []
    for index in indices:
        while stack and heights[stack[-1]] >= heights[index]:
            stack.pop()
        bounds[index] = stack[-1] if stack else default
        stack.append(index)
    return bounds


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle in a histogram."""
    count = len(heights)
    left = _nearest_lower(heights, range(count), -1)
    right = _nearest_lower(heights, reversed(range(count)), count)
    return max(
        (height * (right[index] - left[index] - 1) for index, height in enumerate(heights)),
        default=0,
    )