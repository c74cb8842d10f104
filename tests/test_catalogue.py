import math

import pytest

from lcurve.catalogue import (
    COMPUTATIONAL,
    DEFAULTS,
    PHYSICAL,
    fit_order,
    limit,
    required_names,
    spot_groups,
)


def test_fit_order_starts_with_q_and_iangle():
    assert fit_order(False, False, False)[:2] == ["q", "iangle"]


def test_fit_order_radii_versus_potentials():
    radii = fit_order(True, False, False)
    pots = fit_order(False, False, False)
    assert radii[2:4] == ["r1", "r2"]
    assert pots[2:4] == ["cphi3", "cphi4"]
    assert "cphi3" not in radii
    assert "r1" not in pots


def test_disc_and_spot_sections_are_added_in_place():
    base = fit_order(True, False, False)
    disc = fit_order(True, True, False)
    both = fit_order(True, True, True)
    added = [n for n in disc if n not in base]
    assert added[0] == "rdisc1"
    assert added[-1] == "absorb_edge"
    assert disc.index("rdisc1") == disc.index("third") + 1
    spot_added = [n for n in both if n not in disc]
    assert spot_added[0] == "radius_spot"
    assert spot_added[-1] == "cfrac_spot"


def test_fit_order_ends_with_star_spots():
    order = fit_order(False, True, True)
    assert order[-1] == "uesp_temp"
    groups = spot_groups()
    tail = [n for g in groups.values() for n in g]
    assert order[-len(tail):] == tail


def test_fit_order_has_no_duplicates():
    order = fit_order(True, True, True)
    assert len(order) == len(set(order))


def test_limits_from_source():
    assert limit("q") == (0.01, 2.0)
    assert limit("iangle") == (0.0, 90.0)
    assert limit("absorb") == (0.0, 1.0)
    assert limit("t0") == (-math.inf, math.inf)
    assert limit("pdot") == (-math.inf, math.inf)
    assert limit("period") == (0.0, math.inf)
    assert limit("stsp11_long") == (0.0, math.inf)


def test_every_fitted_name_has_ordered_limits():
    for name in fit_order(True, True, True) + fit_order(False, False, False):
        lo, hi = limit(name)
        assert lo < hi


def test_unknown_limit_raises():
    with pytest.raises(KeyError):
        limit("delta_phase")
    with pytest.raises(KeyError):
        limit("nonsense")


def test_spot_groups_members_share_prefix():
    groups = spot_groups()
    assert set(groups) == {"stsp11", "stsp12", "stsp13", "stsp21", "stsp22", "uesp"}
    for prefix, names in groups.items():
        assert all(n.startswith(prefix) for n in names)
    assert groups["stsp21"] == ("stsp21_long", "stsp21_lat", "stsp21_fwhm", "stsp21_tcen")
    assert len(groups["uesp"]) == 5


def test_spot_groups_returns_a_copy():
    groups = spot_groups()
    groups.pop("uesp")
    assert "uesp" in spot_groups()


def test_required_names_exclude_star_spots():
    names = required_names()
    assert not any(n.startswith(("stsp", "uesp")) for n in names)
    assert "delta_phase" in names
    assert "iscale" in names
    assert len(names) == len(set(names))


def test_required_names_cover_fit_order_and_defaults():
    names = set(required_names())
    spot_names = {n for g in spot_groups().values() for n in g}
    for name in fit_order(True, True, True) + fit_order(False, True, True):
        if name not in spot_names:
            assert name in names
    assert set(DEFAULTS) <= names
    assert names == set(PHYSICAL) | set(COMPUTATIONAL)


def test_defaults_are_fixed_zero_parameters():
    for text in DEFAULTS.values():
        fields = text.split()
        assert float(fields[0]) == 0.0
        assert fields[3] == "0"