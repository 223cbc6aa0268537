import math

import pytest

from cafrecord.enums import (
    SIGNALING_NAN,
    UNINITIALIZED_INT,
    Det,
    G4Process,
    Generator,
    GenieInteractionMode,
    GenieInteractionType,
    GenieStatus,
    MCType,
    MeVPrtlChannel,
    Plane,
    ReweightType,
    Wall,
)


def test_sentinels():
    assert math.isnan(SIGNALING_NAN)
    assert Plane(UNINITIALIZED_INT) is Plane.UNKNOWN


def test_detector_values():
    assert Det(0) is Det.UNKNOWN
    assert Det(1) is Det.SBND
    assert Det(2) is Det.ICARUS


def test_plane_lookup_by_value():
    assert Plane(-1) is Plane.UNKNOWN
    assert Plane(2) is Plane.COLLECTION


def test_invalid_plane_raises():
    with pytest.raises(ValueError):
        Plane(3)


@pytest.mark.parametrize(
    "enum_cls", [Wall, MCType, Generator, MeVPrtlChannel, GenieInteractionMode]
)
def test_small_enums_are_contiguous(enum_cls):
    values = sorted(member.value for member in enum_cls)
    assert values == list(range(values[0], values[0] + len(values)))


def test_wall_back_value():
    assert Wall(6) is Wall.BACK
    assert MCType(4) is MCType.OVERLAY


def test_interaction_type_offsets():
    assert GenieInteractionType(1000) is GenieInteractionType.NUANCE_OFFSET
    assert GenieInteractionType(1001) is GenieInteractionType.CCQE
    assert GenieInteractionType(1100) is GenieInteractionType.MEC_2P2H
    assert GenieInteractionType(1090) is GenieInteractionType.RES_CC_NUBAR_PROTON_PI0_PI0


def test_interaction_type_unique_values():
    members = list(GenieInteractionType)
    assert [GenieInteractionType(m.value) for m in members] == members
    assert len(GenieInteractionType.__members__) == len(members)


def test_genie_status_gap():
    assert GenieStatus.DECAYED_STATE == 3
    assert GenieStatus.CORRELATED_NUCLEON == 10
    assert GenieStatus.NOT_GENIE == 17
    with pytest.raises(ValueError):
        GenieStatus(5)


def test_g4_process_contiguous_and_named():
    values = [member.value for member in G4Process]
    assert values == list(range(len(values)))
    assert G4Process["eBrem"] == 43
    assert G4Process(63) is G4Process.UNKNOWN


def test_reweight_type():
    assert ReweightType(-1) is ReweightType.DEFAULT
    assert ReweightType.MULTI_SIGMA == 3