"""Tensor representations of the two-body terms evaluated between pairs of bodies."""

import dataclasses
import functools
import logging
import typing

import torch

from mbpair._constants import (
    BODY_A,
    BODY_B,
    REAL_ROLES,
    VIRTUAL_ROLES,
    SiteRole,
    VariableKind,
)

if typing.TYPE_CHECKING:
    from mbpair.polynomials import PolynomialFn

_LOGGER = logging.getLogger(__name__)


DeviceType = typing.Literal["cpu", "cuda"]
Precision = typing.Literal["single", "double"]

BodyLabel = typing.Literal["a", "b"]


def _cast(
    tensor: torch.Tensor,
    device: DeviceType | None = None,
    precision: Precision | None = None,
) -> torch.Tensor:
    """Cast a tensor to the specified device."""

    if precision is not None:
        if tensor.dtype in (torch.float32, torch.float64):
            dtype = torch.float32 if precision == "single" else torch.float64
        elif tensor.dtype in (torch.int32, torch.int64):
            dtype = torch.int32 if precision == "single" else torch.int64
        else:
            raise NotImplementedError(f"cannot cast {tensor.dtype} to {precision}")
    else:
        dtype = None

    return tensor.to(device=device, dtype=dtype)


class VSiteWeights(typing.NamedTuple):
    """The mixing weights used to place the two virtual sites of a rigid monomer."""

    in_plane: float
    """The weight of the bisector ``0.5 * (bond_1 + bond_2)``."""
    out_of_plane: float
    """The weight of the normal ``bond_1 x bond_2``."""


@dataclasses.dataclass(frozen=True)
class BodyDef:
    """One of the two interacting bodies of a pair term, either a single ion or a
    three site rigid monomer (anchor + two peripheral atoms)."""

    name: str
    """A human readable name, e.g. ``"h2o"`` or ``"na"``."""
    n_atoms: int
    """The number of real atoms, 1 for an ion and 3 for a rigid monomer."""

    v_sites: VSiteWeights | None = None
    """The weights used to place two virtual sites on the monomer, or ``None`` if
    the body has no virtual sites."""

    def __post_init__(self):
        if self.n_atoms not in (1, 3):
            raise ValueError(f"a body must contain 1 or 3 atoms, not {self.n_atoms}")
        if self.v_sites is not None and self.n_atoms != 3:
            raise ValueError("virtual sites can only be attached to 3 atom bodies")

    @property
    def n_v_sites(self) -> int:
        """The number of virtual sites attached to this body."""
        return 0 if self.v_sites is None else len(VIRTUAL_ROLES)

    @property
    def roles(self) -> tuple[SiteRole, ...]:
        """The roles of all sites (real atoms first) owned by this body."""
        return REAL_ROLES[: self.n_atoms] + (
            () if self.v_sites is None else VIRTUAL_ROLES
        )


class SiteKey(typing.NamedTuple):
    """A unique key identifying a site of either body in a pair."""

    body: BodyLabel
    role: SiteRole


@dataclasses.dataclass(frozen=True)
class PrimitiveDef:
    """The definition of a primitive variable, i.e. a scalar function of the
    distance between two sites that is fed into the polynomial."""

    kind: VariableKind
    site_1: SiteKey
    site_2: SiteKey

    k: float
    """The decay rate [Å^-1]."""
    r0: float
    """The reference distance [Å]."""


@dataclasses.dataclass(frozen=True, eq=False)
class TensorPairModel:
    """A fitted two-body term between two bodies, described by the table of
    primitive variables it is built from rather than by bespoke code.

    Notes:
        * Sites are stored in a single buffer ordered as the real atoms of ``a``,
          the real atoms of ``b``, the virtual sites of ``a`` and then the virtual
          sites of ``b``. Use ``site_index`` rather than hard-coding offsets.
        * The switching function is controlled by the distance between the anchors
          of the two bodies.
    """

    name: str

    body_a: BodyDef
    body_b: BodyDef

    variables: tuple[PrimitiveDef, ...]
    """The primitive variables, in the order expected by the polynomial."""

    coefficients: torch.Tensor
    """The fitted coefficients of the polynomial with ``shape=(n_terms,)``."""
    polynomial_fn: "PolynomialFn"
    """The function that evaluates the polynomial and its derivatives."""

    r_inner: float
    """The distance [Å] at which the switching function starts to turn off."""
    r_outer: float
    """The distance [Å] beyond which the term is exactly zero."""

    def __post_init__(self):
        object.__setattr__(self, "variables", tuple(self.variables))

        if not 0.0 <= self.r_inner < self.r_outer:
            raise ValueError(
                f"the switching radii must satisfy 0 <= r_inner < r_outer, found "
                f"r_inner={self.r_inner} r_outer={self.r_outer}"
            )

        for variable in self.variables:
            idx_1 = self.site_index(variable.site_1)
            idx_2 = self.site_index(variable.site_2)

            if idx_1 == idx_2:
                raise ValueError(f"{variable} couples a site with itself")

        n_terms = getattr(self.polynomial_fn, "n_terms", None)
        n_variables = getattr(self.polynomial_fn, "n_variables", None)

        if n_terms is not None and n_terms != self.coefficients.shape[-1]:
            raise ValueError(
                f"the polynomial expects {n_terms} coefficients but "
                f"{self.coefficients.shape[-1]} were provided"
            )
        if n_variables is not None and n_variables != len(self.variables):
            raise ValueError(
                f"the polynomial expects {n_variables} variables but the model "
                f"defines {len(self.variables)}"
            )

        _LOGGER.debug(
            f"created {self.name} model with {len(self.variables)} variables and "
            f"{self.coefficients.shape[-1]} coefficients"
        )

    def body(self, label: BodyLabel) -> BodyDef:
        """Returns the body with a given label."""

        if label == BODY_A:
            return self.body_a
        elif label == BODY_B:
            return self.body_b

        raise ValueError(f"unknown body {label}, expected {BODY_A} or {BODY_B}")

    @property
    def n_real_sites(self) -> int:
        """The total number of real atoms in both bodies."""
        return self.body_a.n_atoms + self.body_b.n_atoms

    @property
    def n_sites(self) -> int:
        """The total number of sites (atoms and virtual sites) in both bodies."""
        return self.n_real_sites + self.body_a.n_v_sites + self.body_b.n_v_sites

    def site_index(self, key: SiteKey) -> int:
        """Returns the index of a site in the combined site buffer.

        Raises:
            ValueError: If the body does not have a site with the requested role.
        """
        body = self.body(key.body)

        if key.role not in body.roles:
            raise ValueError(f"body {key.body} ({body.name}) has no {key.role} site")

        if key.role in REAL_ROLES:
            offset = 0 if key.body == BODY_A else self.body_a.n_atoms
            return offset + REAL_ROLES.index(key.role)

        offset = self.n_real_sites + (0 if key.body == BODY_A else self.body_a.n_v_sites)
        return offset + VIRTUAL_ROLES.index(key.role)

    def site_idxs(self, label: BodyLabel, roles: typing.Iterable[SiteRole]) -> list[int]:
        """Returns the buffer indices of several sites of one body."""
        return [self.site_index(SiteKey(label, role)) for role in roles]

    @functools.cached_property
    def variable_idxs(self) -> torch.Tensor:
        """The buffer indices of the two sites of each variable with
        ``shape=(n_variables, 2)``."""
        return torch.tensor(
            [
                [self.site_index(variable.site_1), self.site_index(variable.site_2)]
                for variable in self.variables
            ],
            dtype=torch.int64,
        ).reshape(-1, 2)

    @functools.cached_property
    def variable_params(self) -> torch.Tensor:
        """The ``k`` and ``r0`` of each variable with ``shape=(n_variables, 2)``."""
        return torch.tensor(
            [[variable.k, variable.r0] for variable in self.variables],
            dtype=torch.float64,
        ).reshape(-1, 2)

    @functools.cached_property
    def variable_is_coul(self) -> torch.Tensor:
        """Whether each variable has the screened Coulomb form."""
        return torch.tensor(
            [variable.kind == VariableKind.COUL for variable in self.variables],
            dtype=torch.bool,
        )

    def to(
        self, device: DeviceType | None = None, precision: Precision | None = None
    ) -> "TensorPairModel":
        """Cast this object to the specified device."""

        polynomial_fn = self.polynomial_fn

        if hasattr(polynomial_fn, "to"):
            polynomial_fn = polynomial_fn.to(device, precision)

        return dataclasses.replace(
            self,
            coefficients=_cast(self.coefficients, device, precision),
            polynomial_fn=polynomial_fn,
        )
