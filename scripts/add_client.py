"""
Provisions a tenant directly in the configured database, bypassing the HTTP
admin endpoint.

Usage:
    python scripts/add_client.py acme --api-key <write-secret> --read-token <read-secret>
    python scripts/add_client.py acme --api-key k --read-token t --on-duplicate ignore
"""
import sys, os, argparse
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import logging

from backend.app.config import get_settings
from backend.app.database import Database
from backend.app.errors import Conflict
from backend.app.tenants import create_client

logger = logging.getLogger("add_client")


def main(argv=None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Provision an API client (tenant)")
    parser.add_argument("client_id")
    parser.add_argument("--api-key", required=True, help="write credential for connectors")
    parser.add_argument("--read-token", required=True, help="read credential for frontends")
    parser.add_argument(
        "--on-duplicate",
        choices=["reject", "ignore"],
        default=settings.duplicate_client_policy,
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
    )

    database = Database(settings)
    database.create_all()
    db = database.session()
    try:
        created = create_client(db, args.client_id, args.api_key, args.read_token, on_duplicate=args.on_duplicate)
    except Conflict as exc:
        logger.error("%s", exc.message)
        return 1
    finally:
        db.close()
        database.dispose()

    print(f"Client '{args.client_id}' {'added' if created else 'already exists; left unchanged'}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
