import hypothesis.strategies

from fallible import Success, Failure

values = hypothesis.strategies.integers()
errors = hypothesis.strategies.sampled_from(["io-error", "bad-encoding", "x"])

successes = hypothesis.strategies.builds(Success, values)
failures = hypothesis.strategies.builds(Failure, errors)
results = hypothesis.strategies.one_of(successes, failures)

functions = hypothesis.strategies.sampled_from(
    [
        lambda x: x + 1,
        lambda x: x * 2,
        lambda x: -x,
        lambda x: x // 3,
        str,
    ]
)
int_functions = hypothesis.strategies.sampled_from(
    [lambda x: x + 1, lambda x: x * 2, lambda x: -x, lambda x: x // 3]
)


def _half(x: int):
    return Success(x // 2) if x % 2 == 0 else Failure("odd")


def _positive(x: int):
    return Success(x) if x > 0 else Failure("not-positive")


def _always_fails(x: int):
    return Failure("x")


result_functions = hypothesis.strategies.sampled_from(
    [_half, _positive, _always_fails, lambda x: Success(x + 1)]
)
