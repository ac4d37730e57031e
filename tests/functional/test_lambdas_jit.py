import jax
import jax.numpy as jnp

from maia.functional.lambdas import (
    to_receiver_form,
    to_explicit_form,
    as_supplier,
    evaluate,
)


def test_round_trip_jit():
    block = lambda x: jnp.sum(x**2)
    round_trip = jax.jit(to_explicit_form(to_receiver_form(block)))

    x = jnp.arange(4.0)
    result = round_trip(x)
    assert isinstance(result, jax.Array)
    assert jnp.allclose(result, block(x))


def test_receiver_form_grad():
    grad = jax.grad(to_receiver_form(lambda x: 3.0 * x**2))
    assert jnp.allclose(grad(2.0), 12.0)


def test_evaluate_supplier_inside_jit():
    @jax.jit
    def scaled(x):
        return x * evaluate(as_supplier(2.0))

    assert jnp.allclose(scaled(jnp.ones(3)), 2.0)
