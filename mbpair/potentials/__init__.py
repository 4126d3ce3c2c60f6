"""Evaluate the energy and gradients of two-body terms."""

from mbpair.potentials._pair import (
    PairTerm,
    compute_cutoff,
    compute_pair_energy,
    compute_pair_term,
)
from mbpair.potentials.force_matrix import ForceMatrixTerm, compute_force_matrix
from mbpair.potentials.switch import compute_switch
from mbpair.potentials.variables import (
    PrimitiveVariables,
    compute_coul_variable,
    compute_exp_variable,
    compute_primitive_contributions,
    compute_primitive_variables,
    distribute_primitive_grads,
)

__all__ = [
    "ForceMatrixTerm",
    "PairTerm",
    "PrimitiveVariables",
    "compute_coul_variable",
    "compute_cutoff",
    "compute_exp_variable",
    "compute_force_matrix",
    "compute_pair_energy",
    "compute_pair_term",
    "compute_primitive_contributions",
    "compute_primitive_variables",
    "compute_switch",
    "distribute_primitive_grads",
]
