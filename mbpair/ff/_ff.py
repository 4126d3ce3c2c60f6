"""Build tensor models from the calibrated constants of a two-body fit."""

import logging
import typing

import torch

import mbpair
from mbpair._constants import BODY_A, BODY_B, SiteRole, VariableKind
from mbpair._models import BodyDef, PrimitiveDef, SiteKey, VSiteWeights
from mbpair.ff._config import IonIonParameters, WaterIonParameters, WaterWaterParameters
from mbpair.ff._parameters import PARAMETER_SETS

_LOGGER = logging.getLogger(__name__)

_ParameterType = WaterWaterParameters | WaterIonParameters | IonIonParameters

_MODEL_BUILDERS: dict[type, typing.Callable[..., mbpair.TensorPairModel]] = {}


O_A = SiteKey(BODY_A, SiteRole.ANCHOR)
H_A1 = SiteKey(BODY_A, SiteRole.PERIPHERAL_1)
H_A2 = SiteKey(BODY_A, SiteRole.PERIPHERAL_2)
X_A1 = SiteKey(BODY_A, SiteRole.VIRTUAL_1)
X_A2 = SiteKey(BODY_A, SiteRole.VIRTUAL_2)

O_B = SiteKey(BODY_B, SiteRole.ANCHOR)
H_B1 = SiteKey(BODY_B, SiteRole.PERIPHERAL_1)
H_B2 = SiteKey(BODY_B, SiteRole.PERIPHERAL_2)
X_B1 = SiteKey(BODY_B, SiteRole.VIRTUAL_1)
X_B2 = SiteKey(BODY_B, SiteRole.VIRTUAL_2)

ION_A = SiteKey(BODY_A, SiteRole.ANCHOR)
ION_B = SiteKey(BODY_B, SiteRole.ANCHOR)


def model_builder(parameter_type: type):
    """A decorator used to flag a function as being able to build a tensor model from
    a specific type of parameters."""

    def _model_builder_inner(func):
        if parameter_type in _MODEL_BUILDERS:
            raise KeyError(
                f"A model builder is already registered for {parameter_type.__name__}."
            )

        _MODEL_BUILDERS[parameter_type] = func
        return func

    return _model_builder_inner


def _resolve_coefficients(
    parameters: _ParameterType, coefficients: torch.Tensor | None
) -> torch.Tensor:
    if coefficients is None and parameters.coefficients is None:
        raise ValueError(
            "no polynomial coefficients were provided and the parameters do not "
            "define any"
        )

    if coefficients is None:
        coefficients = parameters.coefficients

    return torch.as_tensor(coefficients, dtype=torch.float64)


def _water(weights: VSiteWeights) -> BodyDef:
    return BodyDef("h2o", 3, weights)


@model_builder(WaterWaterParameters)
def build_water_water_model(
    parameters: WaterWaterParameters,
    polynomial_fn: "mbpair.PolynomialFn | None" = None,
    coefficients: torch.Tensor | None = None,
    name: str = "h2o-h2o",
) -> mbpair.TensorPairModel:
    """Builds a water-water model.

    Notes:
        * The two waters are ordered O, H, H. Each carries two virtual sites (X)
          placed using ``parameters.in_plane`` and ``parameters.out_of_plane``.

    Args:
        parameters: The calibrated constants.
        polynomial_fn: The function that evaluates the fitted polynomial of the
            31 primitive variables.
        coefficients: The coefficients of the polynomial. If none, the coefficients
            stored in ``parameters`` are used.
        name: The name to give the model.

    Returns:
        The tensor model.
    """

    if polynomial_fn is None:
        raise ValueError("a polynomial_fn must be provided for water-water models")

    exp, coul = VariableKind.EXP, VariableKind.COUL

    d_intra, d_inter = parameters.d_intra, parameters.d_inter

    k_hh_intra, k_oh_intra = parameters.k_hh_intra, parameters.k_oh_intra
    k_hh, k_oh, k_oo = parameters.k_hh_coul, parameters.k_oh_coul, parameters.k_oo_coul
    k_xh, k_xo, k_xx = parameters.k_xh_main, parameters.k_xo_main, parameters.k_xx_main

    variables = [
        PrimitiveDef(exp, H_A1, H_A2, k_hh_intra, d_intra),
        PrimitiveDef(exp, H_B1, H_B2, k_hh_intra, d_intra),
        PrimitiveDef(exp, O_A, H_A1, k_oh_intra, d_intra),
        PrimitiveDef(exp, O_A, H_A2, k_oh_intra, d_intra),
        PrimitiveDef(exp, O_B, H_B1, k_oh_intra, d_intra),
        PrimitiveDef(exp, O_B, H_B2, k_oh_intra, d_intra),
        *(
            PrimitiveDef(coul, h_a, h_b, k_hh, d_inter)
            for h_a in (H_A1, H_A2)
            for h_b in (H_B1, H_B2)
        ),
        PrimitiveDef(coul, O_A, H_B1, k_oh, d_inter),
        PrimitiveDef(coul, O_A, H_B2, k_oh, d_inter),
        PrimitiveDef(coul, O_B, H_A1, k_oh, d_inter),
        PrimitiveDef(coul, O_B, H_A2, k_oh, d_inter),
        PrimitiveDef(coul, O_A, O_B, k_oo, d_inter),
        *(
            PrimitiveDef(exp, x_a, h_b, k_xh, d_inter)
            for x_a in (X_A1, X_A2)
            for h_b in (H_B1, H_B2)
        ),
        *(
            PrimitiveDef(exp, x_b, h_a, k_xh, d_inter)
            for x_b in (X_B1, X_B2)
            for h_a in (H_A1, H_A2)
        ),
        PrimitiveDef(exp, O_A, X_B1, k_xo, d_inter),
        PrimitiveDef(exp, O_A, X_B2, k_xo, d_inter),
        PrimitiveDef(exp, O_B, X_A1, k_xo, d_inter),
        PrimitiveDef(exp, O_B, X_A2, k_xo, d_inter),
        *(
            PrimitiveDef(exp, x_a, x_b, k_xx, d_inter)
            for x_a in (X_A1, X_A2)
            for x_b in (X_B1, X_B2)
        ),
    ]

    weights = VSiteWeights(parameters.in_plane, parameters.out_of_plane)

    return mbpair.TensorPairModel(
        name=name,
        body_a=_water(weights),
        body_b=_water(weights),
        variables=variables,
        coefficients=_resolve_coefficients(parameters, coefficients),
        polynomial_fn=polynomial_fn,
        r_inner=parameters.r_inner,
        r_outer=parameters.r_outer,
    )


@model_builder(WaterIonParameters)
def build_water_ion_model(
    parameters: WaterIonParameters,
    polynomial_fn: "mbpair.PolynomialFn | None" = None,
    coefficients: torch.Tensor | None = None,
    name: str | None = None,
) -> mbpair.TensorPairModel:
    """Builds a water-ion model.

    Notes:
        * The water (ordered O, H, H) is the first body and the ion the second. The
          water carries two lone-pair virtual sites (Lp).

    Args:
        parameters: The calibrated constants.
        polynomial_fn: The function that evaluates the fitted polynomial of the
            8 primitive variables.
        coefficients: The coefficients of the polynomial. If none, the coefficients
            stored in ``parameters`` are used.
        name: The name to give the model. Defaults to ``"h2o-{ion}"``.

    Returns:
        The tensor model.
    """

    if polynomial_fn is None:
        raise ValueError("a polynomial_fn must be provided for water-ion models")

    exp, coul = VariableKind.EXP, VariableKind.COUL

    o, h_1, h_2, lp_1, lp_2 = O_A, H_A1, H_A2, X_A1, X_A2

    variables = [
        PrimitiveDef(exp, h_1, h_2, parameters.k_hh_intra, parameters.d_hh_intra),
        PrimitiveDef(exp, o, h_1, parameters.k_oh_intra, parameters.d_oh_intra),
        PrimitiveDef(exp, o, h_2, parameters.k_oh_intra, parameters.d_oh_intra),
        PrimitiveDef(coul, ION_B, h_1, parameters.k_xh_coul, parameters.d_xh_coul),
        PrimitiveDef(coul, ION_B, h_2, parameters.k_xh_coul, parameters.d_xh_coul),
        PrimitiveDef(coul, ION_B, o, parameters.k_xo_coul, parameters.d_xo_coul),
        PrimitiveDef(exp, ION_B, lp_1, parameters.k_xlp_main, parameters.d_xlp_main),
        PrimitiveDef(exp, ION_B, lp_2, parameters.k_xlp_main, parameters.d_xlp_main),
    ]

    weights = VSiteWeights(parameters.in_plane, parameters.out_of_plane)

    return mbpair.TensorPairModel(
        name=f"h2o-{parameters.ion}" if name is None else name,
        body_a=_water(weights),
        body_b=BodyDef(parameters.ion, 1),
        variables=variables,
        coefficients=_resolve_coefficients(parameters, coefficients),
        polynomial_fn=polynomial_fn,
        r_inner=parameters.r_inner,
        r_outer=parameters.r_outer,
    )


@model_builder(IonIonParameters)
def build_ion_ion_model(
    parameters: IonIonParameters,
    polynomial_fn: "mbpair.PolynomialFn | None" = None,
    coefficients: torch.Tensor | None = None,
    name: str | None = None,
) -> mbpair.TensorPairModel:
    """Builds an ion-ion model.

    Args:
        parameters: The calibrated constants.
        polynomial_fn: The function that evaluates the fitted polynomial of the
            single primitive variable. Defaults to the power series
            ``sum_n c_n v ** n`` with ``n = 1 ... n_coefficients``.
        coefficients: The coefficients of the polynomial. If none, the coefficients
            stored in ``parameters`` are used.
        name: The name to give the model. Defaults to ``"{ion_a}-{ion_b}"``.

    Returns:
        The tensor model.
    """

    coefficients = _resolve_coefficients(parameters, coefficients)

    if polynomial_fn is None:
        polynomial_fn = mbpair.MonomialPolynomial.power_series(len(coefficients))

    variables = [
        PrimitiveDef(VariableKind.EXP, ION_A, ION_B, parameters.k, parameters.d)
    ]

    return mbpair.TensorPairModel(
        name=f"{parameters.ion_a}-{parameters.ion_b}" if name is None else name,
        body_a=BodyDef(parameters.ion_a, 1),
        body_b=BodyDef(parameters.ion_b, 1),
        variables=variables,
        coefficients=coefficients,
        polynomial_fn=polynomial_fn,
        r_inner=parameters.r_inner,
        r_outer=parameters.r_outer,
    )


def build_model(
    parameters: str | _ParameterType,
    polynomial_fn: "mbpair.PolynomialFn | None" = None,
    coefficients: torch.Tensor | None = None,
) -> mbpair.TensorPairModel:
    """Builds a tensor model from either the name of a published fit or a set of
    parameters.

    Args:
        parameters: The name of a fit in ``PARAMETER_SETS`` (e.g. ``"mbpol"`` or
            ``"h2o-na-pol0"``), or the parameters themselves.
        polynomial_fn: The function that evaluates the fitted polynomial. This is
            required for fits that involve water.
        coefficients: The coefficients of the polynomial, which override any that
            are stored with the parameters.

    Returns:
        The tensor model.
    """

    name = None

    if isinstance(parameters, str):
        if parameters not in PARAMETER_SETS:
            raise KeyError(
                f"unknown parameter set {parameters}, expected one of "
                f"{', '.join(PARAMETER_SETS)}"
            )

        name, parameters = parameters, PARAMETER_SETS[parameters]

    if type(parameters) not in _MODEL_BUILDERS:
        raise KeyError(f"no model builder is registered for {type(parameters)}")

    builder = _MODEL_BUILDERS[type(parameters)]
    _LOGGER.debug(f"building {name or parameters.type} model using {builder.__name__}")

    kwargs = {} if name is None else {"name": name}
    return builder(parameters, polynomial_fn, coefficients, **kwargs)
