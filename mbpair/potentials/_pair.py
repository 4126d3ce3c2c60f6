"""Evaluate the energy and gradients of a two-body term between a pair of bodies."""

import logging
import typing

import torch

import mbpair
import mbpair.geometry
import mbpair.utils
from mbpair._constants import BODY_A, BODY_B, REAL_ROLES, VIRTUAL_ROLES, SiteRole
from mbpair._models import SiteKey
from mbpair.potentials.switch import compute_switch
from mbpair.potentials.variables import (
    PrimitiveVariables,
    compute_primitive_variables,
    distribute_primitive_grads,
)

_LOGGER = logging.getLogger(__name__)


class PairTerm(typing.NamedTuple):
    """The energy and gradients of a pair term."""

    energy: torch.Tensor
    """The energy [kcal / mol] with ``shape=()`` or ``shape=(n_confs,)``."""
    grad_a: torch.Tensor
    """The gradient [kcal / mol / Å] with respect to the atoms of the first body."""
    grad_b: torch.Tensor
    """The gradient [kcal / mol / Å] with respect to the atoms of the second body."""


class _PolynomialTerm(typing.NamedTuple):
    """The un-switched polynomial evaluated for a batch of pairs."""

    energy: torch.Tensor
    d_energy: torch.Tensor

    variables: PrimitiveVariables
    frames: dict[str, mbpair.geometry.RigidFrame]


def _prepare_inputs(
    model: mbpair.TensorPairModel, coords_a: torch.Tensor, coords_b: torch.Tensor
) -> tuple[torch.Tensor, torch.Tensor, bool]:
    """Validates the coordinates of both bodies and adds a batch dimension.

    Returns:
        The coordinates of both bodies with ``shape=(n_confs, n_atoms, 3)`` and
        whether the inputs were batched.
    """

    if coords_a.ndim != coords_b.ndim:
        raise ValueError("either both or neither of the bodies must be batched")

    is_batched = coords_a.ndim == 3

    coords_a = mbpair.utils.check_coords(coords_a, model.body_a.n_atoms, "body a")
    coords_b = mbpair.utils.check_coords(coords_b, model.body_b.n_atoms, "body b")

    if len(coords_a) != len(coords_b):
        raise ValueError(
            f"the number of conformers of body a ({len(coords_a)}) and body b "
            f"({len(coords_b)}) must match"
        )

    return coords_a, coords_b, is_batched


def _build_site_coords(
    model: mbpair.TensorPairModel, coords_a: torch.Tensor, coords_b: torch.Tensor
) -> tuple[torch.Tensor, dict[str, mbpair.geometry.RigidFrame]]:
    """Builds the buffer of all site coordinates, placing the virtual sites of each
    body that owns them after the real atoms of both bodies."""

    site_coords = [coords_a, coords_b]
    frames = {}

    for label, coords in ((BODY_A, coords_a), (BODY_B, coords_b)):
        body = model.body(label)

        if body.v_sites is None:
            continue

        frame = mbpair.geometry.RigidFrame.from_coords(coords, *body.v_sites)
        frames[label] = frame

        site_coords.append(torch.stack(frame.forward(), dim=-2))

    return torch.cat(site_coords, dim=-2), frames


def _compute_polynomial_term(
    model: mbpair.TensorPairModel, coords_a: torch.Tensor, coords_b: torch.Tensor
) -> _PolynomialTerm:
    site_coords, frames = _build_site_coords(model, coords_a, coords_b)
    variables = compute_primitive_variables(model, site_coords)

    coefficients = mbpair.utils.tensor_like(model.coefficients, other=site_coords)
    energy, d_energy = model.polynomial_fn(coefficients, variables.values)

    return _PolynomialTerm(energy, d_energy, variables, frames)


def _distribute_v_site_grads(
    model: mbpair.TensorPairModel,
    site_grads: torch.Tensor,
    frames: dict[str, mbpair.geometry.RigidFrame],
) -> torch.Tensor:
    """Folds the gradients with respect to virtual sites onto the atoms of the bodies
    that own them.

    Args:
        model: The model being evaluated.
        site_grads: The gradients with respect to every site with
            ``shape=(n_confs, n_sites, 3)``.
        frames: The frames of each body with virtual sites.

    Returns:
        The gradients with respect to the real atoms with
        ``shape=(n_confs, n_real_sites, 3)``.
    """

    grads = site_grads[:, : model.n_real_sites].clone()

    for label, frame in frames.items():
        v_site_idx_1, v_site_idx_2 = model.site_idxs(label, VIRTUAL_ROLES)
        atom_idxs = model.site_idxs(label, REAL_ROLES)

        grads[:, atom_idxs] += frame.adjoint(
            site_grads[:, v_site_idx_1], site_grads[:, v_site_idx_2]
        )

    return grads


def _compute_switch_terms(
    model: mbpair.TensorPairModel,
    energy: torch.Tensor,
    deltas: torch.Tensor,
    distances: torch.Tensor,
) -> tuple[torch.Tensor, torch.Tensor]:
    """Returns the value of the switch for each conformer and the gradient of
    ``switch * energy`` that arises from the switch itself, with respect to the
    anchor of body a, with ``shape=(n_confs, 3)``."""

    switch, d_switch = compute_switch(distances, model.r_inner, model.r_outer)
    switch_grad = (d_switch * energy / distances)[:, None] * deltas

    return switch, switch_grad


def _anchor_idxs(model: mbpair.TensorPairModel) -> tuple[int, int]:
    return (
        model.site_index(SiteKey(BODY_A, SiteRole.ANCHOR)),
        model.site_index(SiteKey(BODY_B, SiteRole.ANCHOR)),
    )


def _zeros_like_inputs(
    coords_a: torch.Tensor, coords_b: torch.Tensor
) -> tuple[torch.Tensor, torch.Tensor, torch.Tensor]:
    """Returns a zero energy per conformer and zero gradients that remain attached to
    the autograd graph of the input coordinates."""

    energy = 0.0 * (coords_a.sum(dim=(1, 2)) + coords_b.sum(dim=(1, 2)))
    return energy, 0.0 * coords_a, 0.0 * coords_b


def compute_pair_term(
    model: mbpair.TensorPairModel, coords_a: torch.Tensor, coords_b: torch.Tensor
) -> PairTerm:
    """Computes the energy [kcal / mol] of a pair term and its analytic gradient
    with respect to the atoms of both bodies.

    Notes:
        * The term is exactly zero when the anchors of the two bodies are further
          apart than ``model.r_outer``.
        * The sites of a body must never coincide, otherwise the result is
          undefined.

    Args:
        model: The model to evaluate.
        coords_a: The coordinates [Å] of the first body with
            ``shape=(n_atoms_a, 3)`` or ``shape=(n_confs, n_atoms_a, 3)``. Rigid
            monomers are ordered anchor, peripheral 1, peripheral 2 (e.g. O, H, H).
        coords_b: The coordinates [Å] of the second body with
            ``shape=(n_atoms_b, 3)`` or ``shape=(n_confs, n_atoms_b, 3)``.

    Returns:
        The energy and the gradients with respect to each body.
    """

    coords_a, coords_b, is_batched = _prepare_inputs(model, coords_a, coords_b)
    n_atoms_a = model.body_a.n_atoms

    deltas, distances = mbpair.geometry.compute_separation(
        coords_a[:, 0], coords_b[:, 0]
    )
    is_outside = distances > model.r_outer

    if is_outside.all():
        _LOGGER.debug(f"all {model.name} pairs are beyond the {model.r_outer} Å cutoff")

        energy, grad_a, grad_b = _zeros_like_inputs(coords_a, coords_b)
    else:
        term = _compute_polynomial_term(model, coords_a, coords_b)

        site_grads = distribute_primitive_grads(
            term.variables, term.d_energy, model.n_sites
        )
        grads = _distribute_v_site_grads(model, site_grads, term.frames)

        switch, switch_grad = _compute_switch_terms(
            model, term.energy, deltas, distances
        )

        energy = switch * term.energy
        grads = switch[:, None, None] * grads

        anchor_idx_a, anchor_idx_b = _anchor_idxs(model)
        grads[:, anchor_idx_a] += switch_grad
        grads[:, anchor_idx_b] -= switch_grad

        energy = torch.where(is_outside, 0.0, energy)
        grads = torch.where(is_outside[:, None, None], 0.0, grads)

        grad_a, grad_b = grads[:, :n_atoms_a], grads[:, n_atoms_a:]

    if not is_batched:
        energy = torch.squeeze(energy, 0)
        grad_a = torch.squeeze(grad_a, 0)
        grad_b = torch.squeeze(grad_b, 0)

    return PairTerm(energy, grad_a, grad_b)


class _PairEnergy(torch.autograd.Function):
    @staticmethod
    def forward(coords_a, coords_b, model):
        return tuple(compute_pair_term(model, coords_a, coords_b))

    @staticmethod
    def setup_context(ctx, inputs, output):
        _, grad_a, grad_b = output

        ctx.mark_non_differentiable(grad_a, grad_b)
        ctx.save_for_backward(grad_a, grad_b)

    @staticmethod
    def backward(ctx, grad_output, *_):
        grad_a, grad_b = ctx.saved_tensors
        grad_output = grad_output[..., None, None]

        return grad_output * grad_a, grad_output * grad_b, None


def compute_pair_energy(
    model: mbpair.TensorPairModel, coords_a: torch.Tensor, coords_b: torch.Tensor
) -> torch.Tensor:
    """Computes the energy [kcal / mol] of a pair term such that back-propagating
    through it yields the analytic gradient rather than differentiating through
    each operation.

    Args:
        model: The model to evaluate.
        coords_a: The coordinates [Å] of the first body with
            ``shape=(n_atoms_a, 3)`` or ``shape=(n_confs, n_atoms_a, 3)``.
        coords_b: The coordinates [Å] of the second body with
            ``shape=(n_atoms_b, 3)`` or ``shape=(n_confs, n_atoms_b, 3)``.

    Returns:
        The energy with ``shape=()`` or ``shape=(n_confs,)``.
    """

    energy, _, _ = _PairEnergy.apply(coords_a, coords_b, model)
    return energy


def compute_cutoff(model: mbpair.TensorPairModel) -> float:
    """Returns the distance [Å] between the anchors of the two bodies beyond which the
    pair term is exactly zero."""
    return model.r_outer
