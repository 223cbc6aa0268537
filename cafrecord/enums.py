"""Enumerations and sentinel constants shared by the record classes."""

from enum import IntEnum

SIGNALING_NAN = float("nan")
"""Marker for a floating-point field that has never been filled."""

UNINITIALIZED_INT = -1
"""Marker for an integer field that has never been filled."""

_NUANCE_OFFSET = 1000


class Det(IntEnum):
    """Which SBN detector."""

    UNKNOWN = 0
    SBND = 1
    ICARUS = 2


class Plane(IntEnum):
    """Wire plane of a TPC."""

    UNKNOWN = -1
    FIRST_INDUCTION = 0
    SECOND_INDUCTION = 1
    COLLECTION = 2


class Wall(IntEnum):
    """Wall of a cryostat that a particle crosses."""

    NONE = 0
    TOP = 1
    BOTTOM = 2
    LEFT = 3
    RIGHT = 4
    FRONT = 5
    BACK = 6


class MCType(IntEnum):
    """Kind of Monte Carlo that produced a record."""

    UNKNOWN = 0
    PARTICLE_GUN = 1
    NEUTRINO = 2
    COSMIC = 3
    OVERLAY = 4


class Generator(IntEnum):
    """Event generator that produced an interaction."""

    UNKNOWN = 0
    GENIE = 1
    MEV_PRTL = 2


class MeVPrtlChannel(IntEnum):
    """Physics channel of a MeV-scale portal particle."""

    UNKNOWN = 0
    HIGGS = 1
    HNL = 2


class GenieInteractionMode(IntEnum):
    """Interaction mode, using the generator's numbering."""

    UNKNOWN = -1
    QE = 0
    RES = 1
    DIS = 2
    COH = 3
    COH_ELASTIC = 4
    ELECTRON_SCATTERING = 5
    IMD_ANNIHILATION = 6
    INVERSE_BETA_DECAY = 7
    GLASHOW_RESONANCE = 8
    AM_NU_GAMMA = 9
    MEC = 10
    DIFFRACTIVE = 11
    EM = 12
    WEAK_MIX = 13


class GenieInteractionType(IntEnum):
    """Interaction type, using Nuance codes shifted by a fixed offset."""

    UNKNOWN = -1
    NUANCE_OFFSET = _NUANCE_OFFSET
    CCQE = _NUANCE_OFFSET + 1
    NCQE = _NUANCE_OFFSET + 2
    RES_CC_NU_PROTON_PI_PLUS = _NUANCE_OFFSET + 3
    RES_CC_NU_NEUTRON_PI0 = _NUANCE_OFFSET + 4
    RES_CC_NU_NEUTRON_PI_PLUS = _NUANCE_OFFSET + 5
    RES_NC_NU_PROTON_PI0 = _NUANCE_OFFSET + 6
    RES_NC_NU_PROTON_PI_PLUS = _NUANCE_OFFSET + 7
    RES_NC_NU_NEUTRON_PI0 = _NUANCE_OFFSET + 8
    RES_NC_NU_NEUTRON_PI_MINUS = _NUANCE_OFFSET + 9
    RES_CC_NUBAR_NEUTRON_PI_MINUS = _NUANCE_OFFSET + 10
    RES_CC_NUBAR_PROTON_PI0 = _NUANCE_OFFSET + 11
    RES_CC_NUBAR_PROTON_PI_MINUS = _NUANCE_OFFSET + 12
    RES_NC_NUBAR_PROTON_PI0 = _NUANCE_OFFSET + 13
    RES_NC_NUBAR_PROTON_PI_PLUS = _NUANCE_OFFSET + 14
    RES_NC_NUBAR_NEUTRON_PI0 = _NUANCE_OFFSET + 15
    RES_NC_NUBAR_NEUTRON_PI_MINUS = _NUANCE_OFFSET + 16
    RES_CC_NU_DELTA_PLUS_PI_PLUS = _NUANCE_OFFSET + 17
    RES_CC_NU_DELTA2_PLUS_PI_MINUS = _NUANCE_OFFSET + 21
    RES_CC_NUBAR_DELTA0_PI_MINUS = _NUANCE_OFFSET + 28
    RES_CC_NUBAR_DELTA_MINUS_PI_PLUS = _NUANCE_OFFSET + 32
    RES_CC_NU_PROTON_RHO_PLUS = _NUANCE_OFFSET + 39
    RES_CC_NU_NEUTRON_RHO_PLUS = _NUANCE_OFFSET + 41
    RES_CC_NUBAR_NEUTRON_RHO_MINUS = _NUANCE_OFFSET + 46
    RES_CC_NUBAR_NEUTRON_RHO0 = _NUANCE_OFFSET + 48
    RES_CC_NU_SIGMA_PLUS_KAON_PLUS = _NUANCE_OFFSET + 53
    RES_CC_NU_SIGMA_PLUS_KAON0 = _NUANCE_OFFSET + 55
    RES_CC_NUBAR_SIGMA_MINUS_KAON0 = _NUANCE_OFFSET + 60
    RES_CC_NUBAR_SIGMA0_KAON0 = _NUANCE_OFFSET + 62
    RES_CC_NU_PROTON_ETA = _NUANCE_OFFSET + 67
    RES_CC_NUBAR_NEUTRON_ETA = _NUANCE_OFFSET + 70
    RES_CC_NU_KAON_PLUS_LAMBDA0 = _NUANCE_OFFSET + 73
    RES_CC_NUBAR_KAON0_LAMBDA0 = _NUANCE_OFFSET + 76
    RES_CC_NU_PROTON_PI_PLUS_PI_MINUS = _NUANCE_OFFSET + 79
    RES_CC_NU_PROTON_PI0_PI0 = _NUANCE_OFFSET + 80
    RES_CC_NUBAR_NEUTRON_PI_PLUS_PI_MINUS = _NUANCE_OFFSET + 85
    RES_CC_NUBAR_NEUTRON_PI0_PI0 = _NUANCE_OFFSET + 86
    RES_CC_NUBAR_PROTON_PI0_PI0 = _NUANCE_OFFSET + 90
    CC_DIS = _NUANCE_OFFSET + 91
    NC_DIS = _NUANCE_OFFSET + 92
    UNUSED1 = _NUANCE_OFFSET + 93
    UNUSED2 = _NUANCE_OFFSET + 94
    CCQE_HYPERON = _NUANCE_OFFSET + 95
    NC_COH = _NUANCE_OFFSET + 96
    CC_COH = _NUANCE_OFFSET + 97
    NU_ELECTRON_ELASTIC = _NUANCE_OFFSET + 98
    INVERSE_MU_DECAY = _NUANCE_OFFSET + 99
    MEC_2P2H = _NUANCE_OFFSET + 100


class GenieStatus(IntEnum):
    """Status of a particle as produced by the generator."""

    UNDEFINED = -1
    INITIAL_STATE = 0
    STABLE_FINAL_STATE = 1
    INTERMEDIATE_STATE = 2
    DECAYED_STATE = 3
    CORRELATED_NUCLEON = 10
    NUCLEON_TARGET = 11
    DIS_PRE_FRAGM_HADRONIC_STATE = 12
    PRE_DECAY_RESONANT_STATE = 13
    HADRON_IN_THE_NUCLEUS = 14
    FINAL_STATE_NUCLEAR_REMNANT = 15
    NUCLEON_CLUSTER_TARGET = 16
    NOT_GENIE = 17


class G4Process(IntEnum):
    """Simulation process that started or ended a particle; members carry the process names."""

    primary = 0
    CoupledTransportation = 1
    FastScintillation = 2
    Decay = 3
    anti_neutronInelastic = 4
    neutronInelastic = 5
    anti_protonInelastic = 6
    protonInelastic = 7
    hadInelastic = 8
    pipInelastic = 9
    pimInelastic = 10
    xipInelastic = 11
    ximInelastic = 12
    kaonpInelastic = 13
    kaonmInelastic = 14
    sigmapInelastic = 15
    sigmamInelastic = 16
    kaon0LInelastic = 17
    kaon0SInelastic = 18
    lambdaInelastic = 19
    anti_lambdaInelastic = 20
    He3Inelastic = 21
    ionInelastic = 22
    xi0Inelastic = 23
    alphaInelastic = 24
    tInelastic = 25
    dInelastic = 26
    anti_neutronElastic = 27
    neutronElastic = 28
    anti_protonElastic = 29
    protonElastic = 30
    hadElastic = 31
    pipElastic = 32
    pimElastic = 33
    kaonpElastic = 34
    kaonmElastic = 35
    conv = 36
    phot = 37
    annihil = 38
    nCapture = 39
    nKiller = 40
    muMinusCaptureAtRest = 41
    muIoni = 42
    eBrem = 43
    CoulombScat = 44
    hBertiniCaptureAtRest = 45
    hFritiofCaptureAtRest = 46
    photonNuclear = 47
    muonNuclear = 48
    electronNuclear = 49
    positronNuclear = 50
    compt = 51
    eIoni = 52
    muBrems = 53
    hIoni = 54
    muPairProd = 55
    hPairProd = 56
    LArVoxelReadoutScoringProcess = 57
    ionIoni = 58
    hBrems = 59
    Transportation = 60
    msc = 61
    StepLimiter = 62
    UNKNOWN = 63


class ReweightType(IntEnum):
    """How a systematic weight parameter set was generated."""

    DEFAULT = -1
    MULTI_SIM = 0
    PM_N_SIGMA = 1
    FIXED = 2
    MULTI_SIGMA = 3