# -*- coding: utf-8 -*-
import logging

import pandas as pd

from ieee_cdf.export import write_network_tables
from ieee_cdf.network.core.types import NetworkDataset
from ieee_cdf.network.io import dataset_frames, log_network_info, parse_cdf


def test_frames_keep_file_order(sample_text):
    frames = dataset_frames(parse_cdf(sample_text).dataset)

    assert set(frames) == {"bus", "branch", "loss_zone", "interchange", "tie_line"}
    assert frames["bus"]["number"].tolist() == [1, 2, 3]
    assert frames["branch"][["tap_bus", "z_bus"]].values.tolist() == [[1, 2], [2, 3], [1, 3]]
    assert frames["bus"].loc[2, "shunt_b"] == 0.19


def test_empty_dataset_frames_have_columns():
    frames = dataset_frames(NetworkDataset())

    assert frames["tie_line"].empty
    assert list(frames["tie_line"].columns) == [
        "metered_bus", "metered_area", "non_metered_bus", "non_metered_area", "circuit",
    ]


def test_write_network_tables(tmp_path, sample_text):
    ds = parse_cdf(sample_text).dataset
    written = write_network_tables(tmp_path / "out", ds, incidence=True)

    assert set(written) == {"bus", "branch", "loss_zone", "interchange", "tie_line", "incidence"}
    bus = pd.read_csv(written["bus"])
    assert len(bus) == 3
    inc = pd.read_csv(written["incidence"], index_col="bus")
    assert inc.loc[1].tolist() == [1, 0, 1]


def test_log_network_info(caplog, sample_text):
    ds = parse_cdf(sample_text).dataset
    logger = logging.getLogger("network")

    with caplog.at_level(logging.INFO, logger="network"):
        log_network_info(ds, logger)

    assert "barras=3, ramas=3" in caplog.text
    assert "barras swing: [1]" in caplog.text
