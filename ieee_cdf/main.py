# main.py
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from ieee_cdf.core.config import DATA_DIR, LOG_FORMAT, LOG_LEVEL, OUT_DIR
from ieee_cdf.export import write_network_tables
from ieee_cdf.network.core.errors import CDFParseError
from ieee_cdf.network.core.validators import validate_network
from ieee_cdf.network.io import load_cdf, log_network_info


def resolve_input(name: str) -> Path:
    """Ruta tal cual si existe; si es relativa y no existe, se busca en DATA_DIR."""
    path = Path(name)
    if path.exists() or path.is_absolute():
        return path
    return DATA_DIR / path


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Lee un archivo IEEE CDF y exporta sus tablas")
    parser.add_argument("cdf_in", help=f"archivo IEEE CDF de entrada (relativo: se busca también en {DATA_DIR})")
    parser.add_argument("--out-dir", type=Path, default=None,
                        help=f"carpeta de salida para los CSV (p.ej. {OUT_DIR})")
    parser.add_argument("--incidence", action="store_true", help="exporta también incidence.csv")
    parser.add_argument("--validate", action="store_true",
                        help="valida referencias entre tablas y una barra swing por componente")
    parser.add_argument("--log-level", default=LOG_LEVEL)
    args = parser.parse_args(argv)

    # --- logging
    logging.basicConfig(level=args.log_level.upper(), format=LOG_FORMAT)
    log = logging.getLogger("network")

    try:
        dataset = load_cdf(resolve_input(args.cdf_in))
    except CDFParseError as exc:
        log.error("%s", exc)
        log.error("Revise el archivo; formato en 'Common Format For Exchange of Solved Load Flow Data', "
                  "IEEE Trans. PAS-92, no. 6, pp. 1916-1925, 1973.")
        return 1
    log_network_info(dataset, log)

    if args.validate:
        try:
            validate_network(dataset, require_swing=True)
        except ValueError as exc:
            log.error("%s", exc)
            return 1
        log.info("[network] validación OK")

    if args.out_dir is not None:
        write_network_tables(args.out_dir, dataset, incidence=args.incidence)
    return 0


if __name__ == "__main__":
    sys.exit(main())
