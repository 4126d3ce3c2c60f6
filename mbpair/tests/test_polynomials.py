import pytest
import torch

from mbpair.polynomials import MonomialPolynomial, autograd_polynomial


def test_monomial_polynomial_full():
    polynomial = MonomialPolynomial.full(2, 2)

    expected_exponents = torch.tensor([[1, 0], [0, 1], [2, 0], [1, 1], [0, 2]])

    assert torch.equal(polynomial.exponents, expected_exponents)
    assert polynomial.n_terms == 5
    assert polynomial.n_variables == 2


def test_monomial_polynomial_full_min_degree():
    polynomial = MonomialPolynomial.full(3, 2, min_degree=0)

    # 1 constant, 3 linear and 6 quadratic terms.
    assert polynomial.n_terms == 10
    assert torch.equal(polynomial.exponents[0], torch.zeros(3, dtype=torch.int64))


def test_monomial_polynomial_power_series():
    polynomial = MonomialPolynomial.power_series(3)
    assert torch.equal(polynomial.exponents, torch.tensor([[1], [2], [3]]))


@pytest.mark.parametrize(
    "exponents, expected_raises",
    [
        (torch.tensor([1, 2]), "the exponents must have shape"),
        (torch.tensor([[1, -1]]), "the exponents must be non-negative"),
    ],
)
def test_monomial_polynomial_invalid(exponents, expected_raises):
    with pytest.raises(ValueError, match=expected_raises):
        MonomialPolynomial(exponents)


def test_monomial_polynomial_call():
    polynomial = MonomialPolynomial(torch.tensor([[1, 0], [1, 2], [0, 3]]))

    coefficients = torch.tensor([2.0, -1.0, 0.5], dtype=torch.float64)
    variables = torch.tensor([[2.0, 3.0], [0.5, 0.0]], dtype=torch.float64)

    energy, d_energy = polynomial(coefficients, variables)

    expected_energy = torch.tensor([4.0 - 18.0 + 13.5, 1.0], dtype=torch.float64)
    expected_d_energy = torch.tensor(
        [[2.0 - 9.0, -12.0 + 13.5], [2.0, 0.0]], dtype=torch.float64
    )

    assert torch.allclose(energy, expected_energy)
    assert torch.allclose(d_energy, expected_d_energy)


@pytest.mark.parametrize("n_variables, max_degree", [(1, 13), (3, 3), (8, 2)])
def test_monomial_polynomial_grads(n_variables, max_degree):
    polynomial = MonomialPolynomial.full(n_variables, max_degree)

    generator = torch.Generator().manual_seed(0)

    coefficients = torch.randn(
        polynomial.n_terms, generator=generator, dtype=torch.float64
    )
    variables = torch.rand(
        (4, n_variables), generator=generator, dtype=torch.float64
    ).requires_grad_(True)

    energy, d_energy = polynomial(coefficients, variables)
    (expected_d_energy,) = torch.autograd.grad(energy.sum(), variables)

    assert energy.shape == (4,)
    assert d_energy.shape == (4, n_variables)
    assert torch.allclose(d_energy, expected_d_energy)


def test_autograd_polynomial():
    polynomial = MonomialPolynomial.full(3, 3)

    def energy_fn(coefficients, variables):
        powers = variables[..., None, :] ** polynomial.exponents
        return (powers.prod(dim=-1) * coefficients).sum(dim=-1)

    polynomial_fn = autograd_polynomial(energy_fn)

    generator = torch.Generator().manual_seed(1)

    coefficients = torch.randn(
        polynomial.n_terms, generator=generator, dtype=torch.float64
    )
    variables = torch.rand((5, 3), generator=generator, dtype=torch.float64)

    energy, d_energy = polynomial_fn(coefficients, variables)
    expected_energy, expected_d_energy = polynomial(coefficients, variables)

    assert not energy.requires_grad
    assert torch.allclose(energy, expected_energy)
    assert torch.allclose(d_energy, expected_d_energy)
