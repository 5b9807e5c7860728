"""One-off migration script: users JSON document -> SQL (DATABASE_URL)."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Garantir que o pacote seja importável quando rodado diretamente
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from directory_api.core.config import get_settings  # noqa: E402
from directory_api.repositories.json_storage import JSONDocumentStore  # noqa: E402
from directory_api.repositories.sql_storage import SQLDocumentStore  # noqa: E402


def migrate(source: Path) -> int:
    if not source.exists():
        raise SystemExit(f"Arquivo nao encontrado: {source}")
    document = JSONDocumentStore(source).load()
    target = SQLDocumentStore()
    target.initialize()
    with target.exclusive():
        target.save(document)
    return len(document["users"])


if __name__ == "__main__":
    ap = argparse.ArgumentParser(description="Migrar users.json para o banco SQL")
    ap.add_argument("--source", default=get_settings().users_file, help="Caminho do users.json")
    args = ap.parse_args()
    count = migrate(Path(args.source))
    print(f"{count} usuario(s) migrados para o banco SQL.")
