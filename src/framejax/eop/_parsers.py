"""Parsers for IERS Earth Orientation Parameter data files.

Supports the IERS standard ("finals") fixed-column format.  The same layout
serves both precession-nutation models; only the meaning of the celestial
pole columns differs:

- ``finals.all`` / ``finals.data``: dPsi, dEps (IAU-1980 nutation corrections).
- ``finals.all.iau2000.txt`` / ``finals2000A.all``: dX, dY (IAU-2000A offsets).

Values are returned in the units stored by :mod:`framejax.eop._types`:
arcseconds for angles, seconds for UT1-UTC and LOD.
"""

from __future__ import annotations

import math

# Column ranges for IERS standard format (0-indexed Python slices)
_MJD_RANGE = slice(6, 15)
_PM_X_RANGE = slice(17, 27)
_PM_Y_RANGE = slice(36, 46)
_UT1_UTC_RANGE = slice(58, 68)
_LOD_RANGE = slice(78, 86)
_POLE_1_RANGE = slice(96, 106)
_POLE_2_RANGE = slice(115, 125)
_STANDARD_LINE_LENGTH = 187


def _optional(field: str, scale: float) -> float:
    try:
        return float(field.strip()) * scale
    except ValueError:
        return math.nan


def parse_standard_line(
    line: str,
) -> tuple[float, float, float, float, float, float, float] | None:
    """Parse a single line from an IERS standard format EOP file.

    Lines shorter than 187 characters are padded with spaces (prediction
    lines may have trailing whitespace trimmed). Lines longer than 187
    characters or lines where required fields (MJD, PM_X, PM_Y, UT1-UTC)
    cannot be parsed are skipped (returns None).

    Args:
        line: A single line from the IERS standard format file.

    Returns:
        Tuple of (mjd, pm_x [arcsec], pm_y [arcsec], ut1_utc [s],
        lod [s] or NaN, pole_1 [arcsec] or NaN, pole_2 [arcsec] or NaN),
        where ``pole_1, pole_2`` are dPsi, dEps or dX, dY depending on the
        file. Returns None if the line cannot be parsed.
    """
    if len(line) > _STANDARD_LINE_LENGTH:
        return None

    line = line.ljust(_STANDARD_LINE_LENGTH)

    try:
        mjd = float(line[_MJD_RANGE].strip())
        pm_x = float(line[_PM_X_RANGE].strip())
        pm_y = float(line[_PM_Y_RANGE].strip())
        ut1_utc = float(line[_UT1_UTC_RANGE].strip())
    except ValueError:
        return None

    lod = _optional(line[_LOD_RANGE], 1.0e-3)  # ms -> s
    pole_1 = _optional(line[_POLE_1_RANGE], 1.0e-3)  # mas -> arcsec
    pole_2 = _optional(line[_POLE_2_RANGE], 1.0e-3)  # mas -> arcsec

    return mjd, pm_x, pm_y, ut1_utc, lod, pole_1, pole_2


def parse_standard_file(
    filepath: str,
) -> tuple[
    list[float],
    list[float],
    list[float],
    list[float],
    list[float],
    list[float],
    list[float],
]:
    """Parse an entire IERS standard format EOP file.

    Reads all valid lines and returns parallel lists of EOP values.
    Lines that cannot be parsed (e.g. empty prediction lines at the
    end of the file) are skipped.

    Args:
        filepath: Path to the IERS standard format file.

    Returns:
        Tuple of 7 lists: (mjd, pm_x, pm_y, ut1_utc, lod, pole_1, pole_2).
        Units match :func:`parse_standard_line`.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If no valid lines were parsed.
    """
    columns: tuple[list[float], ...] = ([], [], [], [], [], [], [])

    with open(filepath) as f:
        for line in f:
            result = parse_standard_line(line.rstrip("\n"))
            if result is not None:
                for column, value in zip(columns, result):
                    column.append(value)

    if not columns[0]:
        raise ValueError(f"No valid EOP data found in {filepath}")

    return columns
