"""Tests for cache_solve: hits, misses, invalidation and failures."""

import functools
import logging

import numpy as np
import pytest

from cachematrix import CacheMatrix, cache_solve

LOGGER = "cachematrix.cache_solve"


class CountingSolver:
    """Wraps numpy.linalg.inv and records every call."""

    def __init__(self):
        self.calls = []

    def __call__(self, A, *args, **kwargs):
        self.calls.append((args, kwargs))
        return np.linalg.inv(A)


def test_first_call_computes_and_stores():
    np.random.seed(0)
    A = np.random.rand(5, 5) + 5 * np.eye(5)
    m = CacheMatrix(A)

    inv = cache_solve(m)

    np.testing.assert_allclose(A @ inv, np.eye(5), atol=1e-10)
    assert m.get_inverse() is inv


def test_second_call_hits_cache():
    solver = CountingSolver()
    m = CacheMatrix(np.array([[4.0, 7.0], [2.0, 6.0]]))

    first = cache_solve(m, solver=solver)
    second = cache_solve(m, solver=solver)

    assert second is first
    assert len(solver.calls) == 1


def test_hit_ignores_solver_options():
    solver = CountingSolver()
    m = CacheMatrix(np.eye(3))

    cache_solve(m, solver=solver)
    cache_solve(m, "ignored", solver=solver, tol=1e-3)

    assert solver.calls == [((), {})]


def test_options_forwarded_on_miss():
    solver = CountingSolver()
    m = CacheMatrix(np.eye(2))

    cache_solve(m, 1, solver=solver, flag=True)

    assert solver.calls == [((1,), {"flag": True})]


def test_method_forwarded_to_default_solver():
    A = np.array([[4.0, 3.0, 2.0], [3.0, 2.0, 1.0], [2.0, 1.0, 3.0]])
    m = CacheMatrix(A)

    inv = cache_solve(m, method="gauss_jordan")

    np.testing.assert_allclose(inv, np.linalg.inv(A), atol=1e-10)


def test_cache_hit_logs_notice(caplog):
    m = CacheMatrix(np.eye(2))

    with caplog.at_level(logging.INFO, logger=LOGGER):
        cache_solve(m)
        assert "getting cached data" not in caplog.text
        cache_solve(m)

    assert [r.getMessage() for r in caplog.records] == ["getting cached data"]
    assert caplog.records[0].levelno == logging.INFO


def test_set_matrix_forces_recompute():
    solver = CountingSolver()
    m = CacheMatrix(np.eye(2) * 2)
    cache_solve(m, solver=solver)

    m.set_matrix(np.eye(2) * 4)
    inv = cache_solve(m, solver=solver)

    np.testing.assert_allclose(inv, np.eye(2) * 0.25)
    assert len(solver.calls) == 2


def test_singular_matrix_raises_and_is_not_cached():
    m = CacheMatrix(np.array([[1.0, 2.0], [2.0, 4.0]]))

    with pytest.raises(np.linalg.LinAlgError):
        cache_solve(m)

    assert m.get_inverse() is None


def test_failure_is_retried_after_fix():
    m = CacheMatrix(np.zeros((2, 2)))
    with pytest.raises(np.linalg.LinAlgError):
        cache_solve(m)

    m.set_matrix(np.eye(2))
    np.testing.assert_allclose(cache_solve(m), np.eye(2))


def test_solver_error_propagates_unchanged():
    class Boom(Exception):
        pass

    err = Boom("solver failed")

    def solver(A):
        raise err

    m = CacheMatrix(np.eye(2))
    with pytest.raises(Boom) as excinfo:
        cache_solve(m, solver=solver)

    assert excinfo.value is err
    assert m.get_inverse() is None


def test_non_square_matrix_raises():
    m = CacheMatrix(np.ones((2, 3)))

    with pytest.raises(np.linalg.LinAlgError):
        cache_solve(m)

    assert m.get_inverse() is None


def test_scenario(caplog):
    m = CacheMatrix(np.array([[2.0, 0.0], [0.0, 2.0]]))

    first = cache_solve(m)
    np.testing.assert_allclose(first, [[0.5, 0.0], [0.0, 0.5]])

    with caplog.at_level(logging.INFO, logger=LOGGER):
        second = cache_solve(m)
    np.testing.assert_array_equal(second, first)
    assert "getting cached data" in caplog.text

    m.set_matrix([[1, 2], [3, 4]])
    assert m.get_inverse() is None

    np.testing.assert_allclose(cache_solve(m), [[-2.0, 1.0], [1.5, -0.5]])


def test_routine_with_own_solver_option_is_bound_with_partial():
    seen = []

    def invert(A, solver="default"):
        seen.append(solver)
        return np.linalg.inv(A)

    m = CacheMatrix(np.eye(2) * 2)
    cache_solve(m, solver=functools.partial(invert, solver="lapack"))

    assert seen == ["lapack"]
    np.testing.assert_allclose(m.get_inverse(), np.eye(2) * 0.5)
