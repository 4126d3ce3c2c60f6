"""General utility functions"""

import typing

import torch

_size = int | torch.Size | list[int] | tuple[int, ...]


def zeros_like(size: _size, other: torch.Tensor) -> torch.Tensor:
    """Create a tensor of zeros with the same device and type as another tensor."""
    return torch.zeros(size, dtype=other.dtype, device=other.device)


def tensor_like(data: typing.Any, other: torch.Tensor) -> torch.Tensor:
    """Create a tensor with the same device and type as another tensor."""

    if isinstance(data, torch.Tensor):
        return data.clone().detach().to(other.device, other.dtype)

    return torch.tensor(data, dtype=other.dtype, device=other.device)


def check_coords(coords: torch.Tensor, n_atoms: int, name: str) -> torch.Tensor:
    """Checks the shape of the coordinates of a body and adds a batch dimension if
    one is not already present.

    Args:
        coords: The coordinates [Å] with ``shape=(n_atoms, 3)`` or
            ``shape=(n_confs, n_atoms, 3)``.
        n_atoms: The expected number of atoms.
        name: The name of the body to use in error messages.

    Returns:
        The coordinates with ``shape=(n_confs, n_atoms, 3)``.
    """

    if coords.ndim not in (2, 3) or coords.shape[-2:] != (n_atoms, 3):
        raise ValueError(
            f"the coordinates of {name} must have shape=({n_atoms}, 3) or "
            f"shape=(n_confs, {n_atoms}, 3), found {tuple(coords.shape)}"
        )

    return coords if coords.ndim == 3 else torch.unsqueeze(coords, 0)
