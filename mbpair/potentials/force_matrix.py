"""Decompose the gradient of a pair term into contributions from each pair of atoms.

The primitive variables of a term couple atoms with the virtual sites of the other
body (and virtual sites with each other). Those contributions are re-attributed to
the real atoms whose geometry placed each virtual site, so that the final matrix
only refers to real atoms while its rows still sum to the per-atom gradients.
"""

import logging
import typing

import torch

import mbpair
import mbpair.geometry
import mbpair.utils
from mbpair._constants import BODY_A, BODY_B, REAL_ROLES, VIRTUAL_ROLES, SiteRole
from mbpair._models import SiteKey
from mbpair.potentials._pair import (
    _anchor_idxs,
    _compute_polynomial_term,
    _compute_switch_terms,
    _distribute_v_site_grads,
    _prepare_inputs,
    _zeros_like_inputs,
)
from mbpair.potentials.variables import (
    PrimitiveVariables,
    compute_primitive_contributions,
    distribute_primitive_grads,
)

_LOGGER = logging.getLogger(__name__)


class ForceMatrixTerm(typing.NamedTuple):
    """The energy, gradients and pairwise gradient decomposition of a pair term."""

    energy: torch.Tensor
    """The energy [kcal / mol] with ``shape=()`` or ``shape=(n_confs,)``."""
    grad_a: torch.Tensor
    """The gradient [kcal / mol / Å] with respect to the atoms of the first body."""
    grad_b: torch.Tensor
    """The gradient [kcal / mol / Å] with respect to the atoms of the second body."""

    force_matrix: torch.Tensor
    """The gradient [kcal / mol / Å] of atom ``i`` due to its interaction with atom
    ``j`` with ``shape=(n_real_sites, n_real_sites, 3)`` or
    ``shape=(n_confs, n_real_sites, n_real_sites, 3)``, where atoms are ordered as
    the atoms of ``a`` followed by the atoms of ``b``."""


def _compute_dense_force_matrix(
    model: mbpair.TensorPairModel,
    variables: PrimitiveVariables,
    d_energy: torch.Tensor,
) -> torch.Tensor:
    """Builds the antisymmetric matrix of gradient contributions between every pair
    of sites, including virtual sites.

    Returns:
        The matrix with ``shape=(n_confs, n_sites, n_sites, 3)``.
    """

    n_confs, n_sites = len(d_energy), model.n_sites

    contributions = compute_primitive_contributions(variables, d_energy)

    pair_idxs = variables.idxs[:, 0] * n_sites + variables.idxs[:, 1]
    pair_idxs_t = variables.idxs[:, 1] * n_sites + variables.idxs[:, 0]

    force_matrix = mbpair.utils.zeros_like(
        (n_confs, n_sites * n_sites, 3), other=contributions
    )
    force_matrix.index_add_(1, pair_idxs, contributions)
    force_matrix.index_add_(1, pair_idxs_t, -contributions)

    return force_matrix.reshape(n_confs, n_sites, n_sites, 3)


def _fold_v_site_columns(
    model: mbpair.TensorPairModel, force_matrix: torch.Tensor
) -> torch.Tensor:
    """Moves the contributions due to each virtual site (columns) onto the anchor of
    the body that owns it."""

    force_matrix = force_matrix.clone()

    for label in (BODY_A, BODY_B):
        if model.body(label).v_sites is None:
            continue

        anchor_idx = model.site_index(SiteKey(label, SiteRole.ANCHOR))

        for v_site_idx in model.site_idxs(label, VIRTUAL_ROLES):
            force_matrix[:, :, anchor_idx] += force_matrix[:, :, v_site_idx]
            force_matrix[:, :, v_site_idx] = 0.0

    return force_matrix


def _fold_v_site_rows(
    model: mbpair.TensorPairModel,
    force_matrix: torch.Tensor,
    frames: dict[str, mbpair.geometry.RigidFrame],
) -> torch.Tensor:
    """Distributes the contributions acting on each virtual site (rows) onto the
    three atoms of the monomer that owns it, independently for every column."""

    force_matrix = force_matrix.clone()

    for label, frame in frames.items():
        v_site_idxs = model.site_idxs(label, VIRTUAL_ROLES)
        atom_idxs = model.site_idxs(label, REAL_ROLES)

        column_frame = mbpair.geometry.RigidFrame(
            frame.origin[:, None],
            frame.bond_1[:, None],
            frame.bond_2[:, None],
            frame.in_plane,
            frame.out_of_plane,
        )
        # shape=(n_confs, n_sites, n_atoms, 3)
        row_grads = column_frame.adjoint(
            force_matrix[:, v_site_idxs[0]], force_matrix[:, v_site_idxs[1]]
        )

        force_matrix[:, atom_idxs] += row_grads.transpose(1, 2)
        force_matrix[:, v_site_idxs] = 0.0

    return force_matrix


def compute_force_matrix(
    model: mbpair.TensorPairModel, coords_a: torch.Tensor, coords_b: torch.Tensor
) -> ForceMatrixTerm:
    """Computes the energy [kcal / mol] and gradients of a pair term, together with
    the decomposition of the gradients into contributions between each pair of atoms.

    Notes:
        * Contributions due to a virtual site are attributed to the anchor of the
          body that owns it, while contributions acting on a virtual site are
          distributed over the three atoms of its body.
        * The sum over ``j`` of ``force_matrix[..., i, j, :]`` equals the gradient
          with respect to atom ``i`` returned by ``compute_pair_term``.

    Args:
        model: The model to evaluate.
        coords_a: The coordinates [Å] of the first body with
            ``shape=(n_atoms_a, 3)`` or ``shape=(n_confs, n_atoms_a, 3)``.
        coords_b: The coordinates [Å] of the second body with
            ``shape=(n_atoms_b, 3)`` or ``shape=(n_confs, n_atoms_b, 3)``.

    Returns:
        The energy, gradients and force matrix.
    """

    coords_a, coords_b, is_batched = _prepare_inputs(model, coords_a, coords_b)

    n_confs = len(coords_a)
    n_atoms_a, n_real_sites = model.body_a.n_atoms, model.n_real_sites

    deltas, distances = mbpair.geometry.compute_separation(
        coords_a[:, 0], coords_b[:, 0]
    )
    is_outside = distances > model.r_outer

    if is_outside.all():
        _LOGGER.debug(f"all {model.name} pairs are beyond the {model.r_outer} Å cutoff")

        energy, grad_a, grad_b = _zeros_like_inputs(coords_a, coords_b)
        grads = torch.cat([grad_a, grad_b], dim=1)

        force_matrix = mbpair.utils.zeros_like(
            (n_confs, n_real_sites, n_real_sites, 3), other=coords_a
        )
        force_matrix = force_matrix + grads[:, :, None, :]
    else:
        term = _compute_polynomial_term(model, coords_a, coords_b)

        site_grads = distribute_primitive_grads(
            term.variables, term.d_energy, model.n_sites
        )
        grads = _distribute_v_site_grads(model, site_grads, term.frames)

        force_matrix = _compute_dense_force_matrix(
            model, term.variables, term.d_energy
        )
        force_matrix = _fold_v_site_columns(model, force_matrix)
        force_matrix = _fold_v_site_rows(model, force_matrix, term.frames)
        force_matrix = force_matrix[:, :n_real_sites, :n_real_sites]

        switch, switch_grad = _compute_switch_terms(
            model, term.energy, deltas, distances
        )

        energy = switch * term.energy
        grads = switch[:, None, None] * grads
        force_matrix = switch[:, None, None, None] * force_matrix

        anchor_idx_a, anchor_idx_b = _anchor_idxs(model)

        grads[:, anchor_idx_a] += switch_grad
        grads[:, anchor_idx_b] -= switch_grad

        force_matrix[:, anchor_idx_a, anchor_idx_b] += switch_grad
        force_matrix[:, anchor_idx_b, anchor_idx_a] -= switch_grad

        energy = torch.where(is_outside, 0.0, energy)
        grads = torch.where(is_outside[:, None, None], 0.0, grads)
        force_matrix = torch.where(is_outside[:, None, None, None], 0.0, force_matrix)

    grad_a, grad_b = grads[:, :n_atoms_a], grads[:, n_atoms_a:]

    if not is_batched:
        energy = torch.squeeze(energy, 0)
        grad_a = torch.squeeze(grad_a, 0)
        grad_b = torch.squeeze(grad_b, 0)
        force_matrix = torch.squeeze(force_matrix, 0)

    return ForceMatrixTerm(energy, grad_a, grad_b, force_matrix)
