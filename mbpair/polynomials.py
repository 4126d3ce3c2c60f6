"""Evaluate fitted polynomials of the primitive variables and their derivatives."""

import functools
import itertools
import typing

import torch

import mbpair.utils

if typing.TYPE_CHECKING:
    from mbpair._models import DeviceType, Precision


PolynomialFn = typing.Callable[
    [torch.Tensor, torch.Tensor], tuple[torch.Tensor, torch.Tensor]
]
"""A function ``fn(coefficients, variables) -> (energy, d_energy)`` that evaluates a
polynomial with ``coefficients.shape=(n_terms,)`` at ``variables`` with
``shape=(..., n_variables)``, returning the energy with ``shape=(...,)`` and its
derivative with respect to each variable with ``shape=(..., n_variables)``."""


class MonomialPolynomial:
    """A polynomial ``sum_t c_t prod_j v_j ** e_tj`` defined by a table of exponents,
    evaluated together with its analytic derivatives.
    """

    def __init__(self, exponents: torch.Tensor):
        """

        Args:
            exponents: The non-negative integer exponent of each variable in each
                term with ``shape=(n_terms, n_variables)``.
        """
        exponents = torch.as_tensor(exponents, dtype=torch.int64)

        if exponents.ndim != 2:
            raise ValueError("the exponents must have shape=(n_terms, n_variables)")
        if (exponents < 0).any():
            raise ValueError("the exponents must be non-negative")

        self.exponents = exponents

    @classmethod
    def full(
        cls, n_variables: int, max_degree: int, min_degree: int = 1
    ) -> "MonomialPolynomial":
        """Creates the polynomial containing every monomial of the variables whose
        total degree lies between ``min_degree`` and ``max_degree`` (inclusive),
        ordered by increasing degree."""

        exponents = []

        for degree in range(min_degree, max_degree + 1):
            for combination in itertools.combinations_with_replacement(
                range(n_variables), degree
            ):
                term = [0] * n_variables

                for variable_idx in combination:
                    term[variable_idx] += 1

                exponents.append(term)

        return cls(torch.tensor(exponents, dtype=torch.int64).reshape(-1, n_variables))

    @classmethod
    def power_series(cls, max_degree: int, min_degree: int = 1) -> "MonomialPolynomial":
        """Creates the polynomial ``sum_n c_n v ** n`` of a single variable."""
        return cls.full(1, max_degree, min_degree)

    @property
    def n_terms(self) -> int:
        return self.exponents.shape[0]

    @property
    def n_variables(self) -> int:
        return self.exponents.shape[1]

    def to(
        self, device: "DeviceType | None" = None, precision: "Precision | None" = None
    ) -> "MonomialPolynomial":
        """Move this polynomial to the specified device. The exponents are always
        stored as integers so ``precision`` is ignored."""
        return MonomialPolynomial(self.exponents.to(device=device))

    def __call__(
        self, coefficients: torch.Tensor, variables: torch.Tensor
    ) -> tuple[torch.Tensor, torch.Tensor]:
        exponents = mbpair.utils.tensor_like(self.exponents, other=variables)
        variables = variables[..., None, :]

        powers = variables**exponents
        d_powers = exponents * variables ** torch.clamp(exponents - 1.0, min=0.0)

        energy = (powers.prod(dim=-1) * coefficients).sum(dim=-1)

        # replace the j-th factor of each term by its derivative in turn.
        is_diagonal = torch.eye(
            self.n_variables, dtype=torch.bool, device=variables.device
        )
        d_terms = torch.where(
            is_diagonal, d_powers[..., :, :, None], powers[..., :, None, :]
        ).prod(dim=-1)

        d_energy = (d_terms * coefficients[:, None]).sum(dim=-2)

        return energy, d_energy


def autograd_polynomial(
    energy_fn: typing.Callable[[torch.Tensor, torch.Tensor], torch.Tensor],
) -> PolynomialFn:
    """Wraps a differentiable ``energy_fn(coefficients, variables) -> energy`` so that
    it also returns the derivatives of the energy with respect to the variables,
    computed using ``torch.autograd``.

    Args:
        energy_fn: A function mapping the coefficients with ``shape=(n_terms,)`` and
            variables with ``shape=(..., n_variables)`` to energies with
            ``shape=(...,)``.

    Returns:
        A function satisfying the ``PolynomialFn`` contract.
    """

    @functools.wraps(energy_fn)
    def _polynomial_fn(
        coefficients: torch.Tensor, variables: torch.Tensor
    ) -> tuple[torch.Tensor, torch.Tensor]:
        with torch.enable_grad():
            variables = variables.detach().requires_grad_(True)

            energy = energy_fn(coefficients, variables)
            (d_energy,) = torch.autograd.grad(energy.sum(), variables)

        return energy.detach(), d_energy

    return _polynomial_fn
