import math

from cafrecord.enums import Plane
from cafrecord.track import CaloPoint, Track, TrackCalo


def test_calo_point_defaults():
    cp = CaloPoint()
    assert cp.wire == -1
    assert math.isnan(cp.rr)
    assert math.isnan(cp.dedx)
    assert math.isnan(cp.p.x)


def test_track_calo_defaults():
    c = TrackCalo()
    assert c.nhit == -999
    assert math.isnan(c.ke)
    assert math.isnan(c.charge)
    assert c.points == []


def test_track_calo_set_default_keeps_points():
    c = TrackCalo(points=[CaloPoint(rr=1.0)])
    c.set_default()
    assert c.nhit == -1
    assert c.ke == -1.0
    assert c.charge == -1.0
    assert len(c.points) == 1
    assert c.points[0].rr == 1.0


def test_track_defaults():
    t = Track()
    assert t.producer == 2**32 - 1
    assert t.npts == 2**16 - 1
    assert t.ID == -(2**31)
    assert t.bestplane is Plane.UNKNOWN
    assert math.isnan(t.len)
    assert math.isnan(t.start.z)
    assert t.pfp.id == -5
    assert t.dazzle.pdg == -5


def test_track_has_one_entry_per_plane():
    t = Track()
    assert len(t.chi2pid) == 3
    assert len(t.calo) == 3
    assert all(c.nhit == -999 for c in t.calo)
    assert all(p.pdg == -999 for p in t.chi2pid)


def test_track_per_plane_entries_are_distinct():
    t = Track()
    t.calo[0].set_default()
    assert t.calo[0].nhit == -1
    assert t.calo[1].nhit == -999
    assert t.calo[0] is not t.calo[1]


def test_tracks_do_not_share_state():
    a, b = Track(), Track()
    a.truth.matches.append(None)
    a.chi2pid[2].set_default()
    a.mcsP.set_default()
    assert b.truth.matches == []
    assert b.chi2pid[2].pdg == -999
    assert math.isnan(b.mcsP.fwdP_muon)