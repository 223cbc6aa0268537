import math

from cafrecord.fake_reco import FakeReco, FakeRecoParticle
from cafrecord.vector import Vector3D


def test_particle_defaults():
    p = FakeRecoParticle()
    assert math.isnan(p.ke)
    assert math.isnan(p.costh)
    assert math.isnan(p.len)
    assert p.pid == -999
    assert p.contained is False


def test_fake_reco_defaults():
    r = FakeReco()
    assert math.isnan(r.nuE)
    assert math.isnan(r.wgt)
    assert r.nhad == 0
    assert r.filled is False
    assert r.hadrons == []
    assert math.isnan(r.vtx.x)
    assert r.lepton.pid == -999


def test_instances_do_not_share_mutable_fields():
    a = FakeReco()
    b = FakeReco()
    a.hadrons.append(FakeRecoParticle(pid=2212))
    a.lepton.ke = 0.5
    a.vtx.set_xyz(1.0, 2.0, 3.0)
    assert b.hadrons == []
    assert math.isnan(b.lepton.ke)
    assert math.isnan(b.vtx.x)


def test_fields_hold_given_values():
    lep = FakeRecoParticle(ke=1.25, costh=0.75, len=100.0, pid=13, contained=True)
    r = FakeReco(nuE=2.0, vtx=Vector3D(1.0, 2.0, 3.0), lepton=lep, nhad=1, filled=True)
    assert r.lepton is lep
    assert r.lepton.pid == 13
    assert r.vtx.dot(Vector3D(1.0, 0.0, 0.0)) == 1.0
    assert r.nuE == 2.0
    assert r.filled is True