"""``pathkanri init`` — scaffold a routes module.

Creates the target directory when it does not exist and writes
``routes.py`` into it from the bundled stub.
"""

import argparse
import sys
from pathlib import Path

from pathkanri.cli._templates import ROUTES_PY

ROUTES_FILE = "routes.py"


def create_routes_module(args: argparse.Namespace) -> None:
    """Write ``<args.directory>/routes.py``.

    Refuses to overwrite an existing ``routes.py`` unless ``--force``.
    """
    target_dir = Path(args.directory)
    target = target_dir / ROUTES_FILE

    if target.exists() and not args.force:
        print(
            f"Error: '{target}' already exists (use --force to overwrite)",
            file=sys.stderr,
        )
        raise SystemExit(1)

    target_dir.mkdir(parents=True, exist_ok=True)
    target.write_text(ROUTES_PY)

    print(f"Created '{target}'")
