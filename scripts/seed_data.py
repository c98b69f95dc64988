#!/usr/bin/env python3
"""
Create or remove the demo records shown on the overview page.

Usage:
  python scripts/seed_data.py [--count 50] [--seed 42]
  python scripts/seed_data.py --remove [--user-data]
"""
from __future__ import annotations

import argparse
import asyncio
import random

from friendbook.core.config import get_settings
from friendbook.core.logging_config import setup_logging
from friendbook.db.create_tables import create_all
from friendbook.services.admin_service import AdminService
from friendbook.services.seed_generator import SeedGenerator


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Seed or clear demo friends")
    ap.add_argument("--count", type=int, default=settings.seed_count, help="Number of seeded friends to create")
    ap.add_argument("--seed", type=int, help="Random seed for reproducible data")
    ap.add_argument("--remove", action="store_true", help="Remove rows instead of creating them")
    ap.add_argument("--user-data", action="store_true", help="With --remove, delete user created rows instead")
    args = ap.parse_args()

    setup_logging(settings.log_level, settings.log_file or None)
    create_all()
    service = AdminService(generator=SeedGenerator(random.Random(args.seed)))
    if args.remove:
        counts = asyncio.run(service.remove_seeds(seeded=not args.user_data))
    else:
        if args.count < 0:
            raise SystemExit("--count must be zero or positive")
        counts = asyncio.run(service.seed(args.count))
    print(", ".join(f"{name}: {value}" for name, value in counts.items()))


if __name__ == "__main__":
    main()
