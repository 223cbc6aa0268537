import math

from cafrecord.enums import MeVPrtlChannel
from cafrecord.mevprtl import MeVPrtl
from cafrecord.vector import Vector3D


def test_default_channel_unknown():
    assert MeVPrtl().gen is MeVPrtlChannel.UNKNOWN


def test_default_scalars_are_nan():
    p = MeVPrtl()
    values = (
        p.time, p.E, p.M, p.flux_weight, p.ray_weight, p.decay_weight,
        p.C1, p.C2, p.C3, p.C4, p.C5,
    )
    assert {str(value) for value in values} == {"nan"}


def test_vectors_are_independent():
    a = MeVPrtl()
    b = MeVPrtl()
    a.position.set_xyz(1.0, 2.0, 3.0)
    assert math.isnan(b.position.x)
    assert a.enter is not a.exit
    assert math.isnan(a.start.z)


def test_explicit_construction():
    p = MeVPrtl(gen=MeVPrtlChannel.HNL, E=0.4, M=0.2, momentum=Vector3D(0.0, 0.0, 0.3))
    assert p.gen == 2
    assert p.E == 0.4
    assert p.momentum.z == 0.3