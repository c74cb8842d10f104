# lcurve

Building blocks for modelling the light curves of binary stars. The package
covers these parts:

- reading the model's parameter set from a JSON-style mapping
- limb-darkening laws
- a small numerical array type
- counting the elements of a stellar surface grid
- scaling a model flux to data for the lowest chi-squared

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To install and run the test suite:

```
pip install ".[test]"
pytest
```

## Model parameters

`lcurve.model.Model` is built from a mapping. The mapping must hold a
`model_parameters` mapping, and every value in it must be a string.

- **Physical parameters** (`q`, `iangle`, `r1`, `t1`, `rdisc1`, `radius_spot`, …)
  are written as `"value range dstep vary"`. Any fields after the fourth are
  ignored.
- **Computational settings** (`delta_phase`, `nlat1f`, `roche1`, `limb1`, …)
  are single values such as `"0.01"`, `"40"`, `"1"` or `"Poly"`.
- **Boolean settings** accept `1`/`0`, `true`/`false`, `t`/`f`, `yes`/`no`
  or `y`/`n`, in any case.
- **`limb1` and `limb2`** must be `Poly` or `Claret`.

```python
import json
from lcurve.model import Model

with open("model.json") as fh:
    model = Model(json.load(fh))

print(model.q.value)        # physical parameters are Pparam objects
print(model.nvary())        # number of parameters being fitted
print(model.get_param())    # their current values, in fitting order
print(model.get_name(0))    # name of the first fitted parameter ("UNKNOWN" if out of range)
print(model.get_limit())    # (lower, upper) bounds of the fitted parameters
model.set_param([0.12, 82.0])
model.wrasc("model.txt")    # write the full parameter listing (same text as str(model))
```

### Fitted parameters

A parameter is fitted when its `vary` flag is set. The order in which
parameters are fitted comes from `lcurve.catalogue.fit_order(use_radii,
add_disc, add_spot)`:

- `r1`/`r2` are used when `use_radii` is set, and `cphi3`/`cphi4` otherwise.
- The disc parameters take part only when `add_disc` is set.
- The bright-spot parameters take part only when `add_spot` is set.

`get_range()` and `get_dstep()` return the search ranges and the derivative
steps of the fitted parameters, in the same order.

### Optional parameters and errors

- **Defaults:** `pdot`, `third`, `temp_edge` and `absorb_edge` may be left
  out. They are then set to zero and held fixed, and a warning is logged
  through the `logging` module.
- **Spot groups:** the star-spot groups (`stsp11_*`, `stsp12_*`, `stsp13_*`,
  `stsp21_*`, `stsp22_*`) and the equatorial-spot group (`uesp_*`) are
  optional. A group that is started must be given in full.
- **Configuration errors:** a missing `model_parameters` mapping, a value that
  is not a string, a missing required parameter or an incomplete spot group
  raises `lcurve.config.ConfigError`.
- **Value errors:** a value that cannot be parsed raises
  `lcurve.model.ModelError`, and so does an unknown limb-darkening law or
  setting `glens1` and `roche1` together.

Both exception classes derive from `ValueError`.

`lcurve.config.read_parameters(config)` runs the configuration checks on their
own and returns the parameters as a name-to-string mapping.

`lcurve.pparam.Pparam` holds a single parameter, with the fields `value`,
`range`, `dstep`, `vary` and `defined`. `Pparam.from_string` builds one from a
string, and `lcurve.pparam.parse_bool` reads the boolean settings.

## Limb darkening

```python
from lcurve.ldc import LDC, LimbType

law = LDC(0.5, 0.1, 0.0, 0.0, 0.0, LimbType.POLY)
law.imu(0.7)   # specific intensity relative to mu = 1; 0 for mu <= 0
law.see(0.3)   # True when mu exceeds mucrit
```

`LimbType.CLARET` selects the four-coefficient law in powers of `sqrt(mu)`.

## Other helpers

- **`lcurve.array1d.Array1D`** is a numeric 1-D array. It has:
  - element-wise `+ - * /` with another array or a number; arrays of
    different lengths raise `Array1DError`
  - `max`, `min`, `sum`, `mean`, `length`, `median`, `centile` and `select`
  - `cos` and `sin`
  - `monotonic`
  - `sort`, which sorts in place and returns the original indices
  - `locate` and `hunt`, which search an ordered array
- **`lcurve.numface.numface(nlat, infill, thelo, thehi, nlatfill, nlngfill)`**
  returns the number of surface elements that a stellar grid needs.
- **`lcurve.rescale.re_scale(data, fit)`** scales a model fit to a sequence of
  `Datum(flux, ferr, weight)` points for minimum chi-squared. Points with a
  weight of zero or less are ignored. It returns a `RescaleResult` with these
  fields:
  - `scale`
  - `fit`, the scaled fit
  - `chisq`
  - `wnok`, the weighted number of points

## What this package does not do

It does not compute light curves. It has none of these:

- star, disc or bright-spot surface grids
- Roche-lobe geometry
- eclipse calculations
- surface-brightness calculations

It provides no command-line programs and no fitting or sampling routines. The
model's parameters can be read, checked, updated and written out, but nothing
in the package evaluates the model.