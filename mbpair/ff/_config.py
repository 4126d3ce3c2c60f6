"""Configuration of the calibrated constants of each family of two-body term."""

import typing

import openff.units
import pydantic

_ANGSTROM = openff.units.unit.angstrom
_INV_ANGSTROM = openff.units.unit.angstrom**-1


def _strip_units(unit: openff.units.Unit):
    def _strip_units_inner(value: typing.Any) -> typing.Any:
        if isinstance(value, openff.units.Quantity):
            return value.m_as(unit)

        return value

    return _strip_units_inner


Distance = typing.Annotated[float, pydantic.BeforeValidator(_strip_units(_ANGSTROM))]
"""A distance [Å], provided either as a float or a quantity with length units."""
DecayRate = typing.Annotated[
    float, pydantic.BeforeValidator(_strip_units(_INV_ANGSTROM))
]
"""A decay rate [Å^-1], provided either as a float or a quantity with inverse length
units."""


class _BaseParameters(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(frozen=True, extra="forbid")

    r_inner: Distance = pydantic.Field(
        ...,
        description="The anchor-anchor distance [Å] at which the term starts to be "
        "switched off.",
    )
    r_outer: Distance = pydantic.Field(
        ...,
        description="The anchor-anchor distance [Å] beyond which the term is exactly "
        "zero.",
    )

    coefficients: tuple[float, ...] | None = pydantic.Field(
        None,
        description="The fitted coefficients of the polynomial, or none if they must "
        "be provided when building a model.",
    )

    @pydantic.model_validator(mode="after")
    def _validate_radii(self):
        if not 0.0 <= self.r_inner < self.r_outer:
            raise ValueError(
                f"the switching radii must satisfy 0 <= r_inner < r_outer, found "
                f"r_inner={self.r_inner} r_outer={self.r_outer}"
            )

        return self


class _WaterParameters(_BaseParameters):
    in_plane: float = pydantic.Field(
        -9.721486914088159e-02,
        description="The weight of the H-O-H bisector used to place the two virtual "
        "sites of a water molecule.",
    )
    out_of_plane: float = pydantic.Field(
        9.859272078406150e-02,
        description="The weight of the H-O-H plane normal used to place the two "
        "virtual sites of a water molecule.",
    )


class WaterWaterParameters(_WaterParameters):
    """The constants of a water-water term built from 31 primitive variables, where
    each water carries two virtual sites (X)."""

    type: typing.Literal["water-water"] = "water-water"

    k_hh_intra: DecayRate = pydantic.Field(
        ..., description="The decay rate [Å^-1] of the intramolecular H-H variables."
    )
    k_oh_intra: DecayRate = pydantic.Field(
        ..., description="The decay rate [Å^-1] of the intramolecular O-H variables."
    )
    k_hh_coul: DecayRate = pydantic.Field(
        ..., description="The decay rate [Å^-1] of the intermolecular H-H variables."
    )
    k_oh_coul: DecayRate = pydantic.Field(
        ..., description="The decay rate [Å^-1] of the intermolecular O-H variables."
    )
    k_oo_coul: DecayRate = pydantic.Field(
        ..., description="The decay rate [Å^-1] of the intermolecular O-O variable."
    )
    k_xh_main: DecayRate = pydantic.Field(
        ..., description="The decay rate [Å^-1] of the X-H variables."
    )
    k_xo_main: DecayRate = pydantic.Field(
        ..., description="The decay rate [Å^-1] of the X-O variables."
    )
    k_xx_main: DecayRate = pydantic.Field(
        ..., description="The decay rate [Å^-1] of the X-X variables."
    )

    d_intra: Distance = pydantic.Field(
        1.0, description="The reference distance [Å] of the intramolecular variables."
    )
    d_inter: Distance = pydantic.Field(
        4.0, description="The reference distance [Å] of the intermolecular variables."
    )


class WaterIonParameters(_WaterParameters):
    """The constants of a water-ion term built from 8 primitive variables, where the
    water carries two lone-pair virtual sites (Lp)."""

    type: typing.Literal["water-ion"] = "water-ion"

    ion: str = pydantic.Field(..., description="The name of the ion, e.g. 'na'.")

    k_hh_intra: DecayRate = pydantic.Field(
        ..., description="The decay rate [Å^-1] of the intramolecular H-H variable."
    )
    k_oh_intra: DecayRate = pydantic.Field(
        ..., description="The decay rate [Å^-1] of the intramolecular O-H variables."
    )
    k_xh_coul: DecayRate = pydantic.Field(
        ..., description="The decay rate [Å^-1] of the ion-H variables."
    )
    k_xo_coul: DecayRate = pydantic.Field(
        ..., description="The decay rate [Å^-1] of the ion-O variable."
    )
    k_xlp_main: DecayRate = pydantic.Field(
        ..., description="The decay rate [Å^-1] of the ion-Lp variables."
    )

    d_hh_intra: Distance = pydantic.Field(
        ..., description="The reference distance [Å] of the intramolecular H-H variable."
    )
    d_oh_intra: Distance = pydantic.Field(
        ...,
        description="The reference distance [Å] of the intramolecular O-H variables.",
    )
    d_xh_coul: Distance = pydantic.Field(
        ..., description="The reference distance [Å] of the ion-H variables."
    )
    d_xo_coul: Distance = pydantic.Field(
        ..., description="The reference distance [Å] of the ion-O variable."
    )
    d_xlp_main: Distance = pydantic.Field(
        ..., description="The reference distance [Å] of the ion-Lp variables."
    )


class IonIonParameters(_BaseParameters):
    """The constants of an ion-ion term built from a single primitive variable."""

    type: typing.Literal["ion-ion"] = "ion-ion"

    ion_a: str = pydantic.Field(..., description="The name of the first ion.")
    ion_b: str = pydantic.Field(..., description="The name of the second ion.")

    k: DecayRate = pydantic.Field(
        ..., description="The decay rate [Å^-1] of the ion-ion variable."
    )
    d: Distance = pydantic.Field(
        ..., description="The reference distance [Å] of the ion-ion variable."
    )


PairParameters = typing.Annotated[
    WaterWaterParameters | WaterIonParameters | IonIonParameters,
    pydantic.Field(discriminator="type"),
]
"""Any of the supported families of parameters, discriminated by their ``type``."""
