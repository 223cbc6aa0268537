import math

from cafrecord.crt import CRTHit, CRTHitMatch, CRTTrack, CRTTrackMatch
from cafrecord.vector import Vector3D


def test_hit_defaults():
    h = CRTHit()
    assert all(math.isnan(v) for v in (h.time, h.t0, h.t1, h.pe))
    assert h.plane == -(2**31)
    assert math.isnan(h.position.x)
    assert math.isnan(h.position_err.z)


def test_hit_match_defaults():
    m = CRTHitMatch()
    assert math.isnan(m.distance)
    assert m.hit.plane == -(2**31)


def test_track_hits_are_independent():
    t = CRTTrack()
    assert math.isnan(t.time)
    assert t.hita is not t.hitb
    t.hita.position.set_xyz(1.0, 2.0, 3.0)
    assert math.isnan(t.hitb.position.x)
    assert t.hita.position.mag2() == 14.0


def test_track_match_defaults_and_values():
    m = CRTTrackMatch()
    assert math.isnan(m.time) and math.isnan(m.angle)
    m2 = CRTTrackMatch(time=1.5, angle=0.25)
    assert (m2.time, m2.angle) == (1.5, 0.25)


def test_hit_match_keeps_given_hit():
    hit = CRTHit(position=Vector3D(0.0, 3.0, 4.0), plane=7)
    m = CRTHitMatch(hit=hit, distance=2.5)
    assert m.hit.position.mag() == 5.0
    assert m.hit.plane == 7
    assert m.distance == 2.5