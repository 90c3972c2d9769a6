# /ministry-dashboard-backend/app/scripts/check_ministries.py

"""Prints every ministry in the database. Usage: python -m app.scripts.check_ministries"""

import sys

from app.logging_config import configure_logging
from app.services.diagnostics_service import list_ministries, run_listing


def main() -> int:
    configure_logging()
    return run_listing(list_ministries)


if __name__ == "__main__":
    sys.exit(main())
