# -*- coding: utf-8 -*-
"""Constructores de líneas CDF de ancho fijo para las pruebas."""
from __future__ import annotations

import pytest


def fixed_line(*cells):
    """Arma una línea con celdas (inicio, fin, texto), columnas 1-based inclusivas.

    El texto se alinea a la derecha dentro del rango.
    """
    width = max(end for _, end, _ in cells)
    buf = [" "] * width
    for start, end, text in cells:
        n = end - start + 1
        s = str(text).rjust(n)
        if len(s) != n:
            raise ValueError(f"'{text}' no cabe en columnas {start}-{end}")
        buf[start - 1:end] = list(s)
    return "".join(buf)


def title_line(date="08/19/93", sender="UW ARCHIVE", mva="100.0", year="1962", season="W",
               case_id="IEEE 3 Bus Test Case"):
    return fixed_line(
        (2, 9, date),
        (11, 30, sender.ljust(20)),
        (32, 37, mva),
        (39, 42, year),
        (44, 44, season),
        (46, 45 + len(case_id), case_id),
    )


def bus_line(number, name="Bus", area="1", zone="1", bus_type="0", v="1.0", angle="0.0",
             load_p="0.0", load_q="0.0", gen_p="0.0", gen_q="0.0", base_kv="138.0",
             desired_v="1.0", max_lim="0.0", min_lim="0.0", g="0.0", b="0.0", remote="0"):
    return fixed_line(
        (1, 4, number),
        (6, 17, name.ljust(12)),
        (19, 20, area),
        (21, 23, zone),
        (25, 26, bus_type),
        (28, 33, v),
        (34, 40, angle),
        (41, 49, load_p),
        (50, 59, load_q),
        (60, 67, gen_p),
        (68, 75, gen_q),
        (77, 83, base_kv),
        (85, 90, desired_v),
        (91, 98, max_lim),
        (99, 106, min_lim),
        (107, 114, g),
        (115, 122, b),
        (124, 127, remote),
    )


def branch_line(tap, z, area="1", zone="1", circuit="1", branch_type="0", r="0.01", x="0.05",
                b="0.02", rating_1="100", rating_2="0", rating_3="0", control="0", side="0",
                ratio="0.0", angle="0.0", min_tap="0.0", max_tap="0.0", step="0.0",
                min_val="0.0", max_val="0.0"):
    return fixed_line(
        (1, 4, tap),
        (6, 9, z),
        (11, 12, area),
        (13, 15, zone),
        (17, 17, circuit),
        (19, 19, branch_type),
        (20, 29, r),
        (30, 40, x),
        (41, 50, b),
        (51, 55, rating_1),
        (57, 61, rating_2),
        (63, 67, rating_3),
        (69, 72, control),
        (74, 74, side),
        (77, 82, ratio),
        (84, 90, angle),
        (91, 97, min_tap),
        (98, 104, max_tap),
        (106, 111, step),
        (113, 119, min_val),
        (120, 126, max_val),
    )


def loss_zone_line(number, name):
    return fixed_line((1, 4, number), (6, 5 + len(name), name))


def interchange_line(area, slack_bus, alt_name="Bus 1", export="0.0", tolerance="999.99",
                     code="IEEE3", name="IEEE 3 Bus Test Case"):
    # el área ocupa 1-3 y la barra slack 5-7; la columna 4 queda en blanco
    return fixed_line(
        (1, 3, area),
        (5, 7, slack_bus),
        (9, 20, alt_name.ljust(12)),
        (21, 28, export),
        (30, 35, tolerance),
        (38, 43, code.ljust(6)),
        (46, 45 + len(name), name),
    )


def tie_line_line(metered_bus, metered_area, non_metered_bus, non_metered_area, circuit="1"):
    return fixed_line(
        (1, 4, metered_bus),
        (7, 8, metered_area),
        (11, 14, non_metered_bus),
        (17, 18, non_metered_area),
        (21, 21, circuit),
    )


def sample_lines():
    return [
        title_line(),
        "BUS DATA FOLLOWS                             3 ITEMS",
        bus_line(1, "Bus 1     HV", bus_type="3", v="1.06", gen_p="232.4", gen_q="-16.9"),
        bus_line(2, "Bus 2     HV", bus_type="2", v="1.045", angle="-4.98", load_p="21.7",
                 load_q="12.7", gen_p="40.0", max_lim="50.0", min_lim="-40.0"),
        bus_line(3, "Bus 3     HV", load_p="94.2", load_q="19.0", angle="-12.72", b="0.19", remote="2"),
        "-999",
        "BRANCH DATA FOLLOWS                          3 ITEMS",
        branch_line(1, 2, r="0.01938", x="0.05917", b="0.0528"),
        branch_line(2, 3, r="0.04699", x="0.19797", b="0.0438"),
        branch_line(1, 3, r="0.05403", x="0.22304", b="0.0492", rating_1="0"),
        "-999",
        "LOSS ZONES FOLLOWS                     1 ITEMS",
        loss_zone_line(1, "IEEE 3 BUS"),
        "-99",
        "INTERCHANGE DATA FOLLOWS                 1 ITEMS",
        interchange_line(1, 2),
        "-9",
        "TIE LINES FOLLOWS                     1 ITEMS",
        tie_line_line(1, 1, 3, 1),
        "-999",
        "END OF DATA",
    ]


@pytest.fixture
def sample_text():
    return "\n".join(sample_lines()) + "\n"
