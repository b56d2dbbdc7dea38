"""Command-line entry point: ``python -m electron_installer [project_root]``."""

from __future__ import annotations

import argparse
import logging
import sys

from electron_installer.domain.exceptions import ElectronInstallerError
from electron_installer.hook import install_electron


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="python -m electron_installer",
        description="Install the Electron binary into a project's bin directory.",
    )
    parser.add_argument("project_root", nargs="?", default=".")
    parser.add_argument(
        "--force",
        action="store_true",
        help="Reinstall even if the installed binary is current",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    try:
        result = install_electron(args.project_root, force=args.force)
    except ElectronInstallerError as e:
        logging.getLogger("electron_installer").error(str(e))
        return 1

    print(f"Electron {result.version} {result.status.value}: {result.binary_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
