"""The calibrated constants of the published MB-pol and MB-nrg two-body fits.

The values are opaque fitted quantities and are stored exactly as they were fit.
"""

from mbpair.ff import _coefficients
from mbpair.ff._config import IonIonParameters, WaterIonParameters, WaterWaterParameters


def _water_ion(
    ion: str, coefficients: tuple[float, ...], *values: float
) -> WaterIonParameters:
    (
        k_hh_intra,
        k_oh_intra,
        k_xh_coul,
        k_xo_coul,
        k_xlp_main,
        d_hh_intra,
        d_oh_intra,
        d_xh_coul,
        d_xo_coul,
        d_xlp_main,
        r_inner,
        r_outer,
    ) = values

    return WaterIonParameters(
        ion=ion,
        k_hh_intra=k_hh_intra,
        k_oh_intra=k_oh_intra,
        k_xh_coul=k_xh_coul,
        k_xo_coul=k_xo_coul,
        k_xlp_main=k_xlp_main,
        d_hh_intra=d_hh_intra,
        d_oh_intra=d_oh_intra,
        d_xh_coul=d_xh_coul,
        d_xo_coul=d_xo_coul,
        d_xlp_main=d_xlp_main,
        r_inner=r_inner,
        r_outer=r_outer,
        coefficients=coefficients,
    )


MBPOL = WaterWaterParameters(
    k_hh_intra=-6.480884773303821e-01,
    k_oh_intra=1.674518993682975e00,
    k_hh_coul=1.148231864355956e00,
    k_oh_coul=1.205989761123099e00,
    k_oo_coul=1.395357065790959e00,
    k_xh_main=7.347036852042255e-01,
    k_xo_main=7.998249864422826e-01,
    k_xx_main=7.960663960630585e-01,
    d_intra=1.0,
    d_inter=4.0,
    in_plane=-9.721486914088159e-02,
    out_of_plane=9.859272078406150e-02,
    r_inner=4.5,
    r_outer=6.5,
    coefficients=_coefficients.MBPOL_COEFFICIENTS,
)

# k_hh_intra, k_oh_intra, k_xh_coul, k_xo_coul, k_xlp_main,
# d_hh_intra, d_oh_intra, d_xh_coul, d_xo_coul, d_xlp_main, r_inner, r_outer
H2O_BR_POL0 = _water_ion(
    "br",
    _coefficients.H2O_BR_POL0_COEFFICIENTS,
    2.951167833464670e-01,
    3.331141943760614e-01,
    5.661597529227129e-01,
    8.076624979285920e-01,
    1.009430529406921e00,
    1.153140899745128e00,
    1.427296477192937e00,
    4.309935170051643e00,
    6.984688951176864e00,
    5.515897876336050e00,
    5.5,
    6.5,
)
H2O_BR_POL50 = _water_ion(
    "br",
    _coefficients.H2O_BR_POL50_COEFFICIENTS,
    2.239996679390635e-01,
    2.511419062764456e-01,
    6.308687525749147e-01,
    7.494714869650595e-01,
    1.050726845257100e00,
    2.046944768703250e-01,
    1.257544612711722e00,
    6.995812922320198e00,
    6.999901335477379e00,
    4.793936418157202e00,
    5.5,
    6.5,
)
H2O_BR_POL100 = _water_ion(
    "br",
    _coefficients.H2O_BR_POL100_COEFFICIENTS,
    1.975327500640361e-01,
    2.617953180072867e-01,
    4.677981536517541e-01,
    8.328591854489560e-01,
    7.425459819690536e-01,
    7.395636139500104e-01,
    1.999982215501664e00,
    5.786908831939904e00,
    6.999937722802333e00,
    6.999670438271242e00,
    5.5,
    6.5,
)
H2O_CS_POL0 = _water_ion(
    "cs",
    _coefficients.H2O_CS_POL0_COEFFICIENTS,
    4.028053520238458e-01,
    4.509806860358335e-01,
    4.864870134382200e-01,
    6.288413402784591e-01,
    8.069975251987423e-01,
    1.999837886240069e00,
    1.162051362716558e00,
    6.309550239856037e00,
    6.999999948206465e00,
    3.971458511009841e00,
    6.0,
    7.0,
)
H2O_F_POL0 = _water_ion(
    "f",
    _coefficients.H2O_F_POL0_COEFFICIENTS,
    1.198289240265508e-01,
    2.270606085681964e-01,
    8.653779284320098e-01,
    8.629435215971726e-01,
    1.045757220762339e00,
    6.497863079017504e-01,
    9.018131053340623e-01,
    6.335566001322430e00,
    6.871501255485637e00,
    5.300969484503110e00,
    5.0,
    6.0,
)
H2O_F_POL50 = _water_ion(
    "f",
    _coefficients.H2O_F_POL50_COEFFICIENTS,
    1.616400335828359e-01,
    3.090618526198022e-01,
    8.516313154660000e-01,
    8.677252408732146e-01,
    1.001095638344430e00,
    1.717640275353714e-01,
    4.741238016488328e-01,
    6.326959804886554e00,
    6.998093445441315e00,
    5.108064890685443e00,
    5.0,
    6.0,
)
H2O_I_POL75 = _water_ion(
    "i",
    _coefficients.H2O_I_POL75_COEFFICIENTS,
    1.287860253987811e-01,
    2.521312733790787e-01,
    3.950180440069139e-01,
    1.163343409452539e00,
    7.102580751813152e-01,
    1.793655232739329e00,
    5.676853531148358e-01,
    6.865462207536646e00,
    6.998510996519467e00,
    6.539602724733552e00,
    6.0,
    7.0,
)
H2O_NA_POL0 = _water_ion(
    "na",
    _coefficients.H2O_NA_POL0_COEFFICIENTS,
    4.486597767562190e-01,
    1.999999985087912e00,
    1.137553081822990e-01,
    6.464154361224240e-01,
    8.519110931821103e-01,
    9.527622551741199e-01,
    1.999985130842382e00,
    6.718134294113021e00,
    6.880638895624118e00,
    3.165068379361477e00,
    5.5,
    6.5,
)
H2O_RB_POL100 = _water_ion(
    "rb",
    _coefficients.H2O_RB_POL100_COEFFICIENTS,
    3.195475762417059e-01,
    6.446164826239851e-01,
    5.104027836124081e-01,
    1.273907587244391e00,
    7.482531727951891e-01,
    1.431386688762102e00,
    1.999530480711730e00,
    4.312600876869783e00,
    4.872074227770685e00,
    3.821777646259915e00,
    6.0,
    7.0,
)

CS_CS = IonIonParameters(
    ion_a="cs",
    ion_b="cs",
    k=2.734137883307410e-01,
    d=6.999998946225389e00,
    r_inner=7.0,
    r_outer=8.0,
    coefficients=(
        1.048929473173442e01,
        -3.284695043464244e01,
        2.992253301798043e01,
        8.048119462207147e00,
        -2.655668869224152e01,
        2.766930459247735e00,
        2.294791239835243e01,
        -2.372485169593685e01,
        1.206161002014932e01,
        -3.650855465421387e00,
        6.708072670169118e-01,
        -6.937973069190052e-02,
        3.107952477035096e-03,
    ),
)
K_BR = IonIonParameters(
    ion_a="k",
    ion_b="br",
    k=3.781623438780963e-01,
    d=6.999967921758660e00,
    r_inner=7.0,
    r_outer=8.0,
    coefficients=(
        -6.534537528462854e00,
        2.242515242649925e01,
        -3.335944898284875e01,
        2.780489920328923e01,
        -1.461232310110550e01,
        5.110743201342659e00,
        -1.226896368029253e00,
        2.085655577840249e-01,
        -2.621133862653251e-02,
        2.566131801008566e-03,
        -1.952679604260297e-04,
        1.005514906967285e-05,
        -2.464939330440314e-07,
    ),
)
LI_LI = IonIonParameters(
    ion_a="li",
    ion_b="li",
    k=5.212691985268002e-01,
    d=5.567958391183113e00,
    r_inner=7.0,
    r_outer=8.0,
    coefficients=(
        2.189635745813810e-03,
        -1.002074315769640e-02,
        2.098752755975131e-02,
        -2.317059788562559e-02,
        1.568250415078895e-02,
        -6.897335839521867e-03,
        2.045206858834825e-03,
        -4.154273538257000e-04,
        5.777313828774001e-05,
        -5.390859533752413e-06,
        3.213363659213734e-07,
        -1.100551647955350e-08,
        1.651928503898949e-10,
    ),
)

PARAMETER_SETS: dict[
    str, WaterWaterParameters | WaterIonParameters | IonIonParameters
] = {
    "mbpol": MBPOL,
    "h2o-br-pol0": H2O_BR_POL0,
    "h2o-br-pol50": H2O_BR_POL50,
    "h2o-br-pol100": H2O_BR_POL100,
    "h2o-cs-pol0": H2O_CS_POL0,
    "h2o-f-pol0": H2O_F_POL0,
    "h2o-f-pol50": H2O_F_POL50,
    "h2o-i-pol75": H2O_I_POL75,
    "h2o-na-pol0": H2O_NA_POL0,
    "h2o-rb-pol100": H2O_RB_POL100,
    "cs-cs": CS_CS,
    "k-br": K_BR,
    "li-li": LI_LI,
}
"""The calibrated constants of each published fit, keyed by the name of the fit."""
