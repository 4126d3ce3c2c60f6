"""Primitive variables, i.e. scalar functions of the distance between two sites."""

import typing

import torch

import mbpair.geometry
import mbpair.utils

if typing.TYPE_CHECKING:
    import mbpair


class PrimitiveVariables(typing.NamedTuple):
    """The evaluated primitive variables of a pair term."""

    values: torch.Tensor
    """The value of each variable with ``shape=(..., n_variables)``."""
    grads: torch.Tensor
    """The gradient of each variable with respect to its first site with
    ``shape=(..., n_variables, 3)``. The gradient with respect to the second site is
    its negative."""

    idxs: torch.Tensor
    """The indices of the two sites of each variable with ``shape=(n_variables, 2)``.
    """


def compute_exp_variable(
    k: torch.Tensor | float,
    r0: torch.Tensor | float,
    coords_1: torch.Tensor,
    coords_2: torch.Tensor,
) -> tuple[torch.Tensor, torch.Tensor]:
    """Evaluates ``exp(k * (r0 - r))`` where ``r = |coords_1 - coords_2|``.

    Notes:
        * The two sites must not coincide.

    Args:
        k: The decay rate [Å^-1].
        r0: The reference distance [Å].
        coords_1: The coordinates [Å] of the first site with ``shape=(..., 3)``.
        coords_2: The coordinates [Å] of the second site with ``shape=(..., 3)``.

    Returns:
        The value with ``shape=(...,)`` and its gradient with respect to the first
        site with ``shape=(..., 3)``.
    """

    deltas, distances = mbpair.geometry.compute_separation(coords_1, coords_2)

    value = torch.exp(k * (r0 - distances))
    factor = -k * value / distances

    return value, factor[..., None] * deltas


def compute_coul_variable(
    k: torch.Tensor | float,
    r0: torch.Tensor | float,
    coords_1: torch.Tensor,
    coords_2: torch.Tensor,
) -> tuple[torch.Tensor, torch.Tensor]:
    """Evaluates the screened Coulomb form ``exp(k * (r0 - r)) / r`` where
    ``r = |coords_1 - coords_2|``.

    Notes:
        * The two sites must not coincide.

    Args:
        k: The decay rate [Å^-1].
        r0: The reference distance [Å].
        coords_1: The coordinates [Å] of the first site with ``shape=(..., 3)``.
        coords_2: The coordinates [Å] of the second site with ``shape=(..., 3)``.

    Returns:
        The value with ``shape=(...,)`` and its gradient with respect to the first
        site with ``shape=(..., 3)``.
    """

    deltas, distances = mbpair.geometry.compute_separation(coords_1, coords_2)

    inv_distances = 1.0 / distances

    value = torch.exp(k * (r0 - distances)) * inv_distances
    factor = -(k + inv_distances) * value * inv_distances

    return value, factor[..., None] * deltas


def compute_primitive_variables(
    model: "mbpair.TensorPairModel", site_coords: torch.Tensor
) -> PrimitiveVariables:
    """Evaluates every primitive variable of a pair term.

    Args:
        model: The model defining the variables.
        site_coords: The coordinates [Å] of all sites (atoms and virtual sites) with
            ``shape=(..., n_sites, 3)``, ordered as described by ``model.site_index``.

    Returns:
        The evaluated variables.
    """

    idxs = model.variable_idxs.to(site_coords.device)
    params = mbpair.utils.tensor_like(model.variable_params, other=site_coords)
    is_coul = model.variable_is_coul.to(site_coords.device)

    k, r0 = params[:, 0], params[:, 1]

    coords_1 = site_coords[..., idxs[:, 0], :]
    coords_2 = site_coords[..., idxs[:, 1], :]

    exp_values, exp_grads = compute_exp_variable(k, r0, coords_1, coords_2)
    coul_values, coul_grads = compute_coul_variable(k, r0, coords_1, coords_2)

    values = torch.where(is_coul, coul_values, exp_values)
    grads = torch.where(is_coul[:, None], coul_grads, exp_grads)

    return PrimitiveVariables(values, grads, idxs)


def compute_primitive_contributions(
    variables: PrimitiveVariables, d_energy: torch.Tensor
) -> torch.Tensor:
    """Applies the chain rule to each variable, returning the contribution
    ``dE/dv * dv/d(site_1)`` of each variable with ``shape=(..., n_variables, 3)``.

    Args:
        variables: The evaluated variables.
        d_energy: The derivative of the energy with respect to each variable with
            ``shape=(..., n_variables)``.
    """
    return d_energy[..., None] * variables.grads


def distribute_primitive_grads(
    variables: PrimitiveVariables, d_energy: torch.Tensor, n_sites: int
) -> torch.Tensor:
    """Accumulates the gradient of the energy with respect to every site, adding the
    contribution of each variable to its first site and subtracting it from its
    second.

    Args:
        variables: The evaluated variables.
        d_energy: The derivative of the energy with respect to each variable with
            ``shape=(..., n_variables)``.
        n_sites: The total number of sites.

    Returns:
        The gradients with ``shape=(..., n_sites, 3)``.
    """

    contributions = compute_primitive_contributions(variables, d_energy)
    site_dim = contributions.ndim - 2

    grads = mbpair.utils.zeros_like(
        (*contributions.shape[:-2], n_sites, 3), other=contributions
    )
    grads.index_add_(site_dim, variables.idxs[:, 0], contributions)
    grads.index_add_(site_dim, variables.idxs[:, 1], -contributions)

    return grads
