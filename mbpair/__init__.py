"""Evaluate fitted two-body terms between rigid monomers and ions, together with
their analytic gradients."""

import importlib.metadata

from ._constants import BODY_A, BODY_B, SiteRole, VariableKind
from ._models import (
    BodyDef,
    PrimitiveDef,
    SiteKey,
    TensorPairModel,
    VSiteWeights,
)
from .geometry import RigidFrame, add_v_site_coords, compute_v_site_coords
from .polynomials import MonomialPolynomial, PolynomialFn, autograd_polynomial
from .potentials import (
    ForceMatrixTerm,
    PairTerm,
    compute_cutoff,
    compute_force_matrix,
    compute_pair_energy,
    compute_pair_term,
)

try:
    __version__ = importlib.metadata.version("mbpair")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0+unknown"

__all__ = [
    "BODY_A",
    "BODY_B",
    "SiteRole",
    "VariableKind",
    "BodyDef",
    "PrimitiveDef",
    "SiteKey",
    "TensorPairModel",
    "VSiteWeights",
    "RigidFrame",
    "MonomialPolynomial",
    "PolynomialFn",
    "autograd_polynomial",
    "ForceMatrixTerm",
    "PairTerm",
    "__version__",
    "add_v_site_coords",
    "compute_v_site_coords",
    "compute_cutoff",
    "compute_force_matrix",
    "compute_pair_energy",
    "compute_pair_term",
]
