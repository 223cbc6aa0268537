import math

from cafrecord.enums import G4Process, GenieStatus, Generator, Wall
from cafrecord.true_particle import TrueParticle, TrueParticlePlaneInfo


def test_plane_info_defaults():
    info = TrueParticlePlaneInfo()
    assert math.isnan(info.visE)
    assert info.nhit == 0


def test_plane_grid_shape():
    particle = TrueParticle()
    assert len(particle.plane) == 2
    assert all(len(row) == 3 for row in particle.plane)
    assert all(info.nhit == 0 for row in particle.plane for info in row)


def test_plane_grid_cells_are_independent():
    particle = TrueParticle()
    particle.plane[0][1].nhit = 7
    assert particle.plane[0][1].nhit == 7
    assert particle.plane[1][1].nhit == 0
    assert particle.plane[0][0].nhit == 0


def test_float_defaults_are_nan():
    particle = TrueParticle()
    names = ("genE", "startE", "endE", "genT", "startT", "endT", "length")
    assert {str(getattr(particle, name)) for name in names} == {"nan"}


def test_vectors_default_to_nan():
    particle = TrueParticle()
    names = ("genp", "startp", "endp", "gen", "start", "end")
    components = {
        str(c)
        for name in names
        for c in (getattr(particle, name).x, getattr(particle, name).y, getattr(particle, name).z)
    }
    assert components == {"nan"}


def test_enum_defaults():
    particle = TrueParticle()
    assert particle.wallin is Wall.NONE
    assert particle.wallout is Wall.NONE
    assert particle.generator is Generator.UNKNOWN
    assert particle.start_process is G4Process.UNKNOWN
    assert particle.end_process is G4Process.UNKNOWN
    assert particle.gstatus is GenieStatus.UNDEFINED


def test_integer_defaults():
    particle = TrueParticle()
    assert particle.pdg == -2147483648
    assert particle.G4ID == particle.pdg
    assert particle.interaction_id == particle.pdg
    assert particle.cryostat == -1
    assert particle.parent == 4294967295


def test_flags_default_false():
    particle = TrueParticle()
    assert (particle.cont_tpc, particle.crosses_tpc, particle.contained) == (
        False,
        False,
        False,
    )


def test_mutable_defaults_not_shared():
    a = TrueParticle()
    b = TrueParticle()
    a.daughters.append(3)
    a.start.set_xyz(1.0, 2.0, 3.0)
    assert b.daughters == []
    assert math.isnan(b.start.x)
    assert a.start.x == 1.0


def test_keyword_construction():
    particle = TrueParticle(pdg=13, G4ID=4, daughters=[5, 6], wallin=Wall.TOP)
    assert particle.pdg == 13
    assert particle.G4ID == 4
    assert particle.daughters == [5, 6]
    assert particle.wallin is Wall.TOP