"""Place virtual sites on rigid monomers and distribute gradients back from them."""

import typing

import torch


def compute_separation(
    coords_1: torch.Tensor, coords_2: torch.Tensor
) -> tuple[torch.Tensor, torch.Tensor]:
    """Computes the vectors between pairs of sites as well as their norms.

    Args:
        coords_1: The coordinates [Å] of the first site of each pair with
            ``shape=(..., 3)``.
        coords_2: The coordinates [Å] of the second site of each pair with
            ``shape=(..., 3)``.

    Returns:
        The separation vectors ``coords_1 - coords_2`` and their norms [Å].
    """

    deltas = coords_1 - coords_2
    distances = torch.norm(deltas, dim=-1)

    return deltas, distances


class RigidFrame(typing.NamedTuple):
    """The local frame of a rigid three site monomer, spanned by the two bonds from
    the anchor atom to the peripheral atoms.

    The frame places two virtual sites at

        anchor + 0.5 * in_plane * (bond_1 + bond_2) +/- out_of_plane * (bond_1 x bond_2)

    and maps gradients with respect to those sites back onto the three atoms. The
    two maps are the exact transpose of one another, so any gradient pushed through
    ``adjoint`` is the gradient of the same energy with respect to the atoms.
    """

    origin: torch.Tensor
    """The position of the anchor atom with ``shape=(..., 3)``."""
    bond_1: torch.Tensor
    """The vector from the anchor to the first peripheral atom."""
    bond_2: torch.Tensor
    """The vector from the anchor to the second peripheral atom."""

    in_plane: float
    out_of_plane: float

    @classmethod
    def from_coords(
        cls, coords: torch.Tensor, in_plane: float, out_of_plane: float
    ) -> "RigidFrame":
        """Builds the frame of a monomer.

        Args:
            coords: The coordinates [Å] of the anchor, first peripheral and second
                peripheral atoms with ``shape=(..., 3, 3)``.
            in_plane: The weight of the bond bisector.
            out_of_plane: The weight of the bond normal.
        """
        origin = coords[..., 0, :]

        return cls(
            origin,
            coords[..., 1, :] - origin,
            coords[..., 2, :] - origin,
            in_plane,
            out_of_plane,
        )

    def forward(self) -> tuple[torch.Tensor, torch.Tensor]:
        """Returns the positions [Å] of the two virtual sites, each with
        ``shape=(..., 3)``."""

        in_plane = self.origin + 0.5 * self.in_plane * (self.bond_1 + self.bond_2)
        out_of_plane = self.out_of_plane * torch.linalg.cross(
            self.bond_1, self.bond_2, dim=-1
        )

        return in_plane + out_of_plane, in_plane - out_of_plane

    def adjoint(self, grad_1: torch.Tensor, grad_2: torch.Tensor) -> torch.Tensor:
        """Maps gradients with respect to the two virtual sites onto gradients with
        respect to the three atoms of the monomer.

        Args:
            grad_1: The gradient with respect to the first virtual site with
                ``shape=(..., 3)``. Any leading dimensions must broadcast against
                those of the frame.
            grad_2: The gradient with respect to the second virtual site.

        Returns:
            The gradients with respect to the anchor, first and second peripheral
            atoms with ``shape=(..., 3, 3)``. They sum exactly to
            ``grad_1 + grad_2``.
        """

        grad_sum = grad_1 + grad_2
        grad_diff = grad_1 - grad_2

        in_plane = 0.5 * self.in_plane * grad_sum

        # d/d(bond_1) [g . (bond_1 x bond_2)] = bond_2 x g
        # d/d(bond_2) [g . (bond_1 x bond_2)] = g x bond_1
        grad_peripheral_1 = in_plane + self.out_of_plane * torch.linalg.cross(
            self.bond_2, grad_diff, dim=-1
        )
        grad_peripheral_2 = in_plane - self.out_of_plane * torch.linalg.cross(
            self.bond_1, grad_diff, dim=-1
        )
        grad_anchor = grad_sum - (grad_peripheral_1 + grad_peripheral_2)

        return torch.stack([grad_anchor, grad_peripheral_1, grad_peripheral_2], dim=-2)


def compute_v_site_coords(
    coords: torch.Tensor, in_plane: float, out_of_plane: float
) -> torch.Tensor:
    """Computes the positions of the two virtual sites of a rigid monomer (or batch
    of monomers).

    Args:
        coords: The coordinates [Å] of the anchor and two peripheral atoms with
            ``shape=(3, 3)`` or ``shape=(n_confs, 3, 3)``.
        in_plane: The weight of the bond bisector.
        out_of_plane: The weight of the bond normal.

    Returns:
        The virtual site positions [Å] with ``shape=(2, 3)`` or
        ``shape=(n_confs, 2, 3)``.
    """

    v_site_1, v_site_2 = RigidFrame.from_coords(coords, in_plane, out_of_plane).forward()
    return torch.stack([v_site_1, v_site_2], dim=-2)


def add_v_site_coords(
    coords: torch.Tensor, in_plane: float, out_of_plane: float
) -> torch.Tensor:
    """Appends the coordinates of the two virtual sites to the coordinates of a
    rigid monomer (or batch of monomers).

    Args:
        coords: The coordinates [Å] of the anchor and two peripheral atoms with
            ``shape=(3, 3)`` or ``shape=(n_confs, 3, 3)``.
        in_plane: The weight of the bond bisector.
        out_of_plane: The weight of the bond normal.

    Returns:
        The coordinates [Å] of the atoms followed by the virtual sites with
        ``shape=(5, 3)`` or ``shape=(n_confs, 5, 3)``.
    """

    v_site_coords = compute_v_site_coords(coords, in_plane, out_of_plane)
    return torch.cat([coords, v_site_coords], dim=-2)


def distribute_v_site_grads(
    coords: torch.Tensor,
    grad_1: torch.Tensor,
    grad_2: torch.Tensor,
    in_plane: float,
    out_of_plane: float,
) -> torch.Tensor:
    """Distributes gradients with respect to the two virtual sites of a rigid monomer
    onto its three atoms.

    Args:
        coords: The coordinates [Å] of the anchor and two peripheral atoms with
            ``shape=(3, 3)`` or ``shape=(n_confs, 3, 3)``.
        grad_1: The gradient with respect to the first virtual site with
            ``shape=(3,)`` or ``shape=(n_confs, 3)``.
        grad_2: The gradient with respect to the second virtual site.
        in_plane: The weight of the bond bisector.
        out_of_plane: The weight of the bond normal.

    Returns:
        The gradients with respect to the three atoms with ``shape=(3, 3)`` or
        ``shape=(n_confs, 3, 3)``.
    """

    frame = RigidFrame.from_coords(coords, in_plane, out_of_plane)
    return frame.adjoint(grad_1, grad_2)
