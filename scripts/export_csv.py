#!/usr/bin/env python3
"""
Exporta todas las encuestas guardadas a
encuestas-seguridad-mercado-<fecha>.csv en OUTPUT_DIR (o --out).

Uso: python scripts/export_csv.py [--out DIR] [--xlsx]
"""
import argparse
import logging
import os
import sys
from pathlib import Path

from encuesta_mercado.db.session import SessionLocal
from encuesta_mercado.services.dashboard import AdminDashboard
from encuesta_mercado.services.exporter import ExportFile
from encuesta_mercado.services.records import SqlRecordStore

logger = logging.getLogger("export_csv")


def export(out_dir: Path, xlsx: bool = False) -> Path | None:
    with SessionLocal() as db:
        dashboard = AdminDashboard(SqlRecordStore(db))
        dashboard.refresh()
        result = dashboard.export_xlsx() if xlsx else dashboard.export_csv()

    if not isinstance(result, ExportFile):
        logger.warning(result.mensaje)
        return None

    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / result.filename
    path.write_bytes(result.content)
    logger.info("%d encuestas exportadas en %s", result.rows, path)
    return path


def main(argv=None) -> int:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--out", default=os.getenv("OUTPUT_DIR", "."), help="Directorio de salida")
    parser.add_argument("--xlsx", action="store_true", help="Exportar a Excel en lugar de CSV")
    args = parser.parse_args(argv)

    path = export(Path(args.out), xlsx=args.xlsx)
    return 0 if path else 1


if __name__ == "__main__":
    sys.exit(main())
