from typing import Callable, Iterator, TypeVar

T = TypeVar("T")


def iterate_to_fixpoint(
    f: Callable[[T], T], arg: T, max_iterations: int = 1000
) -> Iterator[T]:
    """Yields f(arg), f(f(arg)), ... up to and including the first result
    equal to its argument.

    :param f: the step function; must be monotone for the iteration to converge
    :param arg: the initial value
    :param max_iterations: the maximum number of applications of `f`
    :raises RuntimeError: if no fixed point is reached within `max_iterations`
    """
    iterations = 0
    while iterations < max_iterations:
        result = f(arg)
        yield result
        if result == arg:
            return
        arg = result
        iterations += 1
    raise RuntimeError(f"Too many iterations for function {f}")
