import math

from cafrecord.enums import ReweightType
from cafrecord.weights import GlobalRecord, WeightMapEntry, WeightParam, WeightPSet


def test_param_defaults():
    p = WeightParam()
    assert p.name == ""
    assert math.isnan(p.mean)
    assert p.covidx == -1


def test_map_entry_holds_given_values():
    param = WeightParam(name="MaCCQE", mean=0.0, width=1.0, covidx=2)
    entry = WeightMapEntry(param, [0.5, 1.0, 1.5])
    assert entry.param.name == "MaCCQE"
    assert entry.vals == [0.5, 1.0, 1.5]


def test_map_entry_default_lists_not_shared():
    a = WeightMapEntry()
    b = WeightMapEntry()
    a.vals.append(1.0)
    assert b.vals == []


def test_pset_defaults_and_independence():
    a = WeightPSet()
    b = WeightPSet()
    assert a.type is ReweightType.DEFAULT
    a.map.append(WeightMapEntry())
    a.covmx.extend([1.0, 0.0, 0.0, 1.0])
    assert b.map == []
    assert b.covmx == []


def test_global_record_collects_psets():
    pset = WeightPSet(name="genie", type=ReweightType.MULTI_SIM, nuniv=100)
    record = GlobalRecord()
    record.wgts.append(pset)
    assert record.wgts[0].name == "genie"
    assert record.wgts[0].nuniv == 100
    assert GlobalRecord().wgts == []