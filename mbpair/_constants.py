"""Constants used throughout the package."""

import enum

if hasattr(enum, "StrEnum"):
    _StrEnum = enum.StrEnum
else:
    import typing

    _S = typing.TypeVar("_S", bound="_StrEnum")

    class _StrEnum(str, enum.Enum):
        """TODO: remove when python 3.10 support is dropped."""

        def __new__(cls: typing.Type[_S], *values: str) -> _S:
            value = str(*values)

            member = str.__new__(cls, value)
            member._value_ = value

            return member

        __str__ = str.__str__


class VariableKind(_StrEnum):
    """An enumeration of the functional forms a primitive variable can take."""

    EXP = "exp(k*(r0-r))"
    COUL = "exp(k*(r0-r))/r"


class SiteRole(_StrEnum):
    """The role a site plays within its body.

    Ions only have an ``ANCHOR``. Rigid monomers (e.g. water) have an anchor (O) and
    two peripheral atoms (H), and optionally two massless virtual sites.
    """

    ANCHOR = "anchor"
    PERIPHERAL_1 = "peripheral_1"
    PERIPHERAL_2 = "peripheral_2"

    VIRTUAL_1 = "virtual_1"
    VIRTUAL_2 = "virtual_2"


REAL_ROLES = (SiteRole.ANCHOR, SiteRole.PERIPHERAL_1, SiteRole.PERIPHERAL_2)
"""The roles of real atoms, in the order their coordinates are expected."""
VIRTUAL_ROLES = (SiteRole.VIRTUAL_1, SiteRole.VIRTUAL_2)
"""The roles of the virtual sites attached to a rigid monomer."""

BODY_A = "a"
"""The label of the first body in a pair."""
BODY_B = "b"
"""The label of the second body in a pair."""
