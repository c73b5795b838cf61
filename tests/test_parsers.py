"""Tests for the VSOP87 file parser and table providers."""

import logging
import math

import pytest

from ephemjax.body import Body
from ephemjax.series import (
    Axis,
    Equinox,
    axis_value,
    default_table_bodies,
    load_default_table,
    load_table_from_vsop87_file,
    parse_vsop87_header,
    parse_vsop87_lines,
    parse_vsop87_term,
    parse_vsop87_text,
)


def _header(power=0, count=1, variable=1, version="D", body="VENUS", coordinates="LBR"):
    return (
        f" VSOP87 VERSION {version}2    {body:<9} VARIABLE {variable} ({coordinates})"
        f"       *T**{power} {count:>6} TERMS    MAIN PROBLEM"
    )


def _term(a, b, c, index=1):
    prefix = f" 2{index:>5}".ljust(79)
    return prefix + f"{a:18.11f}{b:14.11f}{c:20.11f}"


def _sample_lines(version="D", body="VENUS", coordinates="LBR"):
    kw = dict(version=version, body=body, coordinates=coordinates)
    return [
        _header(power=0, count=2, variable=1, **kw),
        _term(3.17614666774, 0.0, 0.0),
        _term(0.01353968419, 5.59313319619, 10213.28554621100, index=2),
        _header(power=1, count=1, variable=1, **kw),
        _term(10213.52943052898, 0.0, 0.0),
        _header(power=0, count=1, variable=2, **kw),
        _term(0.05923638472, 0.26702775812, 10213.28554621100),
        _header(power=0, count=1, variable=3, **kw),
        _term(0.72334820891, 0.0, 0.0),
    ]


# ---------------------------------------------------------------------------
# Line parsers
# ---------------------------------------------------------------------------


class TestParseHeader:
    def test_fields(self):
        header = parse_vsop87_header(_header(power=2, count=367, variable=3))
        assert header.version == "D"
        assert header.body == "VENUS"
        assert header.axis is Axis.R
        assert header.power == 2
        assert header.count == 367

    def test_rectangular_variables(self):
        assert parse_vsop87_header(_header(variable=2, version="A", coordinates="XYZ")).axis is Axis.Y

    def test_term_line_is_not_header(self):
        assert parse_vsop87_header(_term(1.0, 0.0, 0.0)) is None

    def test_out_of_range_variable(self):
        assert parse_vsop87_header(_header(variable=4)) is None


class TestParseTerm:
    def test_columns(self):
        a, b, c = parse_vsop87_term(_term(0.01353968419, 5.59313319619, 10213.285546211))
        assert a == pytest.approx(0.01353968419)
        assert b == pytest.approx(5.59313319619)
        assert c == pytest.approx(10213.285546211)

    def test_short_line(self):
        assert parse_vsop87_term("  2    1  0  0") is None

    def test_malformed_columns_raise(self):
        with pytest.raises(ValueError, match="Malformed"):
            parse_vsop87_term(" " * 79 + "x" * 52)


# ---------------------------------------------------------------------------
# Whole files
# ---------------------------------------------------------------------------


class TestParseLines:
    def test_structure(self):
        table = parse_vsop87_lines(_sample_lines())
        assert table.name == "VSOP87D venus"
        assert table.body is Body.VENUS
        assert table.equinox is Equinox.DATE
        assert [s.power for s in table.axes[Axis.L]] == [0, 1]
        assert table.term_count() == 5
        assert table.term_count(Axis.L) == 3

    def test_amplitudes_not_rescaled(self):
        table = parse_vsop87_lines(_sample_lines())
        assert table.series(Axis.R, 0).terms[0].amplitude == pytest.approx(0.72334820891)

    def test_evaluates(self):
        table = parse_vsop87_lines(_sample_lines())
        tau = 0.01
        expected = (
            3.17614666774
            + 0.01353968419 * math.cos(5.59313319619 + 10213.285546211 * tau)
            + 10213.28554621638 * tau
        )
        assert float(axis_value(table, Axis.L, tau)) == pytest.approx(expected, abs=1e-9)

    @pytest.mark.parametrize(
        "version, coordinates, equinox",
        [
            ("A", "XYZ", Equinox.J2000),
            ("B", "LBR", Equinox.J2000),
            ("C", "XYZ", Equinox.DATE),
            ("D", "LBR", Equinox.DATE),
            ("E", "XYZ", Equinox.J2000),
        ],
    )
    def test_equinox_from_version(self, version, coordinates, equinox):
        table = parse_vsop87_lines(_sample_lines(version=version, coordinates=coordinates))
        assert table.equinox is equinox
        assert table.is_spherical == (coordinates == "LBR")

    def test_custom_name(self):
        assert parse_vsop87_lines(_sample_lines(), name="venus-full").name == "venus-full"

    def test_unknown_body(self):
        table = parse_vsop87_lines(_sample_lines(body="EMB"))
        assert table.body is None
        assert table.name == "VSOP87D emb"

    def test_blank_lines_ignored(self):
        lines = _sample_lines()
        lines.insert(3, "")
        lines.append("   ")
        assert parse_vsop87_lines(lines).term_count() == 5

    def test_unrecognised_line_skipped(self, caplog):
        lines = _sample_lines()
        lines.insert(2, "garbage")
        with caplog.at_level(logging.WARNING, logger="ephemjax.series._parsers"):
            table = parse_vsop87_lines(lines)
        assert table.term_count() == 5
        assert "Skipping unrecognised VSOP87 line" in caplog.text

    def test_logs_summary(self, caplog):
        with caplog.at_level(logging.INFO, logger="ephemjax.series._parsers"):
            parse_vsop87_lines(_sample_lines())
        assert "Parsed VSOP87D table for VENUS: 5 terms" in caplog.text

    def test_no_headers_raise(self):
        with pytest.raises(ValueError, match="No VSOP87 headers"):
            parse_vsop87_lines([])

    def test_term_before_header_raises(self):
        with pytest.raises(ValueError, match="before any header"):
            parse_vsop87_lines([_term(1.0, 0.0, 0.0)] + _sample_lines())

    def test_count_mismatch_raises(self):
        lines = _sample_lines()
        del lines[2]
        with pytest.raises(ValueError, match="declares 2 terms but contains 1"):
            parse_vsop87_lines(lines)

    def test_mixed_bodies_raise(self):
        lines = _sample_lines() + [_header(body="EARTH"), _term(1.0, 0.0, 0.0)]
        with pytest.raises(ValueError, match="block in a"):
            parse_vsop87_lines(lines)

    def test_power_gap_raises(self):
        lines = [
            _header(power=0),
            _term(1.0, 0.0, 0.0),
            _header(power=2),
            _term(1.0, 0.0, 0.0),
        ]
        with pytest.raises(ValueError, match="non-contiguous"):
            parse_vsop87_lines(lines)

    def test_text_matches_lines(self):
        lines = _sample_lines()
        from_text = parse_vsop87_text("\n".join(lines) + "\n")
        from_lines = parse_vsop87_lines(lines)
        for axis in (Axis.L, Axis.B, Axis.R):
            assert from_text.axes[axis] == from_lines.axes[axis]


# ---------------------------------------------------------------------------
# Providers
# ---------------------------------------------------------------------------


class TestLoadFromFile:
    def test_loads(self, tmp_path):
        path = tmp_path / "VSOP87D.ven"
        path.write_text("\n".join(_sample_lines()) + "\n")
        table = load_table_from_vsop87_file(path)
        assert table.body is Body.VENUS
        assert table.term_count() == 5

    def test_accepts_str_and_name(self, tmp_path):
        path = tmp_path / "VSOP87D.ven"
        path.write_text("\n".join(_sample_lines()))
        assert load_table_from_vsop87_file(str(path), name="venus").name == "venus"

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="VSOP87 file not found"):
            load_table_from_vsop87_file(tmp_path / "missing.ven")

    def test_empty_file_raises(self, tmp_path):
        path = tmp_path / "empty.ven"
        path.write_text("")
        with pytest.raises(ValueError, match="No VSOP87 headers"):
            load_table_from_vsop87_file(path)


class TestDefaultTables:
    def test_bodies(self):
        assert default_table_bodies() == tuple(Body)

    @pytest.mark.parametrize(
        "body, terms",
        [
            (Body.MERCURY, 6827),
            (Body.VENUS, 1682),
            (Body.EARTH, 2425),
            (Body.MARS, 5483),
            (Body.JUPITER, 3483),
            (Body.SATURN, 5759),
            (Body.URANUS, 3989),
            (Body.NEPTUNE, 1929),
        ],
    )
    def test_term_counts(self, body, terms):
        table = load_default_table(body)
        assert table.term_count() == terms
        assert table.name == f"VSOP87D {body.value}"
        assert table.body is body
        assert table.equinox is Equinox.DATE
        assert table.is_spherical

    def test_fresh_instance_per_call(self):
        assert load_default_table(Body.VENUS) is not load_default_table(Body.VENUS)

    def test_venus_power_structure(self):
        table = load_default_table(Body.VENUS)
        for axis in (Axis.L, Axis.B, Axis.R):
            assert [s.power for s in table.axes[axis]] == [0, 1, 2, 3, 4, 5]
        assert [len(s) for s in table.axes[Axis.L]] == [367, 215, 70, 9, 5, 5]

    def test_earth_power_structure(self):
        table = load_default_table(Body.EARTH)
        assert [s.power for s in table.axes[Axis.B]] == [0, 1, 2, 3, 4]
        assert len(table.series(Axis.L, 0)) == 559

    def test_leading_terms(self):
        table = load_default_table(Body.VENUS)
        assert table.series(Axis.L, 0).terms[0] == (3.17614666774, 0.0, 0.0)
        assert table.series(Axis.L, 1).terms[0] == (10213.52943052898, 0.0, 0.0)

    def test_by_name(self):
        assert load_default_table("Venus").body is Body.VENUS

    def test_unknown_body_raises(self):
        with pytest.raises(ValueError, match="Unknown body"):
            load_default_table("pluto")

    def test_logs_parse(self, caplog):
        with caplog.at_level(logging.INFO, logger="ephemjax.series._parsers"):
            load_default_table(Body.NEPTUNE)
        assert "Parsed VSOP87D table for NEPTUNE: 1929 terms" in caplog.text

    def test_neptune_single_term_blocks(self):
        table = load_default_table(Body.NEPTUNE)
        assert len(table.series(Axis.L, 5)) == 1
        assert len(table.series(Axis.B, 5)) == 1
        assert table.series(Axis.R, 5) is None
