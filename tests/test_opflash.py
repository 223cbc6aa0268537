import math

from cafrecord.enums import UNINITIALIZED_INT
from cafrecord.opflash import OpFlash
from cafrecord.vector import Vector3D


def _floats(flash):
    return [
        flash.time,
        flash.timewidth,
        flash.timemean,
        flash.timesd,
        flash.firsttime,
        flash.totalpe,
        flash.fasttototal,
    ]


def test_defaults_are_unfilled():
    flash = OpFlash()
    assert flash.onbeamtime is False
    assert flash.cryo == UNINITIALIZED_INT
    assert flash.firstpmt == UNINITIALIZED_INT
    assert all(math.isnan(v) for v in _floats(flash))
    assert len(flash.peperwall) == 2
    assert all(math.isnan(v) for v in flash.peperwall)
    assert math.isnan(flash.center.x)


def test_set_default_time_like_fields_share_placeholder():
    flash = OpFlash()
    flash.set_default()
    assert {flash.time, flash.timemean, flash.firsttime} == {-9999.0}


def test_set_default_width_like_fields_share_placeholder():
    flash = OpFlash()
    flash.set_default()
    assert {
        flash.timewidth,
        flash.timesd,
        flash.totalpe,
        flash.fasttototal,
        *flash.peperwall,
    } == {-5.0}
    assert {flash.cryo, flash.firstpmt} == {-5}


def test_set_default_vectors_use_time_placeholder():
    flash = OpFlash()
    flash.set_default()
    t = flash.time
    assert flash.center == Vector3D(t, t, t)
    assert flash.width == Vector3D(t, t, t)
    assert flash.center is not flash.width


def test_set_default_clears_beam_flag_and_is_repeatable():
    flash = OpFlash(onbeamtime=True, totalpe=350.0)
    flash.set_default()
    reference = OpFlash()
    reference.set_default()
    assert flash.onbeamtime is False
    assert flash == reference


def test_peperwall_not_shared():
    a = OpFlash()
    b = OpFlash()
    a.peperwall[0] = 10.0
    assert a.peperwall[0] == 10.0
    assert str(b.peperwall[0]) == "nan"