#!/usr/bin/env python3
"""
Cadastrar um usuario diretamente no store configurado (STORAGE_BACKEND).

Uso:
  python scripts/add_user.py --first John --last Doe --email john@example.com --phone 29456789 --password secret1
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from directory_api.core.config import get_settings  # noqa: E402
from directory_api.domain.errors import ConflictError, ValidationError  # noqa: E402
from directory_api.repositories.factory import build_document_store  # noqa: E402
from directory_api.services.directory_service import DirectoryService  # noqa: E402


def main() -> None:
    ap = argparse.ArgumentParser(description="Cadastrar usuario no diretorio")
    ap.add_argument("--first", required=True, help="Primeiro nome (letras, max 7)")
    ap.add_argument("--last", required=True, help="Sobrenome (letras, max 7)")
    ap.add_argument("--email", required=True)
    ap.add_argument("--phone", required=True, help="8 digitos, comecando por 2, 4, 5 ou 9")
    ap.add_argument("--password", required=True, help="Sem espacos, max 10")
    args = ap.parse_args()

    store = build_document_store(get_settings())
    store.initialize()
    svc = DirectoryService(store)
    try:
        user = svc.register(
            {
                "firstName": args.first,
                "lastName": args.last,
                "email": args.email,
                "phone": args.phone,
                "password": args.password,
            }
        )
    except ValidationError as exc:
        raise SystemExit("Dados invalidos: " + ", ".join(exc.errors))
    except ConflictError as exc:
        raise SystemExit(exc.message)

    print("OK: usuario cadastrado")
    print(f"  ID: {user.id}")
    print(f"  Email: {user.email}")
    print(f"  Telefone: {user.phone}")


if __name__ == "__main__":
    main()
