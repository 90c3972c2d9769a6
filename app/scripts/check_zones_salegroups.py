# /ministry-dashboard-backend/app/scripts/check_zones_salegroups.py

"""Prints every zone and sale group in the database. Usage: python -m app.scripts.check_zones_salegroups"""

import sys

from app.logging_config import configure_logging
from app.services.diagnostics_service import list_zones_and_sale_groups, run_listing


def main() -> int:
    configure_logging()
    return run_listing(list_zones_and_sale_groups)


if __name__ == "__main__":
    sys.exit(main())
