# cafrecord

`cafrecord` is a data model for the records of common analysis files (CAF)
in short-baseline neutrino experiments. It describes the event header, beam
and trigger information, reconstructed slices, tracks, showers, hits and
stubs, optical flashes, CRT hits and tracks, classifier outputs, and the
Monte Carlo truth behind them.

Every object is a dataclass whose defaults mark a quantity as not yet
filled. Most floating-point fields start as NaN, counters start at zero, and
identifiers start at a sentinel such as `-1`, `-5`, `-999` or the minimum or
maximum of their integer type. A few classifier and fit results (for
example `TrackDazzle`, `ShowerRazzle`, `TrackStoppingChi2Fit` and the scalar
fields of `Shower`) start at `-5` instead.

Several classes also offer `set_default()`, which switches them to the fixed
placeholder values a filled record uses when a quantity could not be
computed: `TruthMatch`, `TrkChi2PID`, `TrkMCS`, `TrkRange`, `PFOChar`,
`TrackCalo`, `Hit`, `OpFlash`, `FlashMatch`, `NuID`, `Slice` and `BNBInfo`.

## Installation

```
pip install cafrecord
```

## Overview

| Module | Contents |
| --- | --- |
| `cafrecord.enums` | `Det`, `Plane`, `Wall`, `MCType`, `Generator`, `MeVPrtlChannel`, `GenieInteractionMode`, `GenieInteractionType`, `GenieStatus`, `G4Process`, `ReweightType`, and the constants `SIGNALING_NAN` and `UNINITIALIZED_INT` |
| `cafrecord.vector` | `Vector3D`, `LorentzVector` |
| `cafrecord.true_particle` | `TrueParticle`, `TrueParticlePlaneInfo` |
| `cafrecord.true_interaction` | `TrueInteraction`, `TrueInteractionPlaneInfo`, `Multiverse` |
| `cafrecord.matching` | `ParticleMatch`, `LegacyParticleMatch`, `TruthMatch`, `TrackTruth` |
| `cafrecord.mevprtl` | `MeVPrtl` |
| `cafrecord.fake_reco` | `FakeReco`, `FakeRecoParticle` |
| `cafrecord.crt` | `CRTHit`, `CRTHitMatch`, `CRTTrack`, `CRTTrackMatch` |
| `cafrecord.track_pid` | `TrkChi2PID`, `TrkMCS`, `TrkRange`, `TrackDazzle`, `TrackScatterClosestApproach`, `TrackStoppingChi2Fit` |
| `cafrecord.pfp` | `PFP`, `PFOChar` |
| `cafrecord.track` | `Track`, `TrackCalo`, `CaloPoint` |
| `cafrecord.shower` | `Shower`, `ShowerPlaneInfo`, `ShowerRazzle`, `ShowerSelection` |
| `cafrecord.hit` | `Hit`, `SpacePoint` |
| `cafrecord.stub` | `Stub`, `StubPlane`, `StubHit` |
| `cafrecord.opflash` | `OpFlash` |
| `cafrecord.flash_match` | `FlashMatch` |
| `cafrecord.crumbs` | `CRUMBSResult`, `CRUMBSTPCVars`, `CRUMBSPDSVars`, `CRUMBSCRTVars` |
| `cafrecord.nuid` | `NuID` |
| `cafrecord.slice` | `Slice`, `SliceRecoBranch` |
| `cafrecord.truth_branch` | `TruthBranch` |
| `cafrecord.header` | `Header`, `BNBInfo`, `NuMIInfo`, `Trigger` |
| `cafrecord.weights` | `WeightParam`, `WeightMapEntry`, `WeightPSet`, `GlobalRecord` |
| `cafrecord.record` | `StandardRecord` |

## Example

```python
from cafrecord.record import StandardRecord
from cafrecord.track import Track
from cafrecord.vector import Vector3D

rec = StandardRecord()
rec.hdr.run = 1234

trk = Track()
trk.start = Vector3D(0.0, 0.0, 0.0)
trk.end = Vector3D(3.0, 4.0, 0.0)
rec.reco.trk.append(trk)
rec.reco.fill_sizes()            # rec.reco.ntrk == 1

length = trk.end.mag()           # 5.0
direction = trk.end.unit()       # Vector3D(x=0.6, y=0.8, z=0.0)
```

`Vector3D` offers `set_xyz(x, y, z)`, `mag2()`, `mag()`, `dot(other)` and
`unit()`; `unit()` of a null vector raises `ZeroDivisionError`.
`LorentzVector` offers `mag()` (of its spatial part), `beta()`, `gamma()`
and `vect()`.

`SliceRecoBranch.fill_sizes()` sets `ntrk`, `nshw` and `nhit` from their
lists and leaves `nstub` as it is. `TruthBranch.fill_sizes()` sets `nnu`
from `nu` and leaves `nprtl` as it is.

## What this package does not do

`cafrecord` only models the records in memory. It does not read or write
analysis files, and it provides no command-line tool.

## Tests

```
pip install "cafrecord[test]"
pytest
```