from hypothesis import given

from .generate_result import results, functions, int_functions


def identity(x):
    return x


@given(results)
def test_identity(x):
    assert x.map(identity) == x


@given(results, int_functions, functions)
def test_composition(x, f, g):
    assert x.map(f).map(g) == x.map(lambda v: g(f(v)))
