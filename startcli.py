"""Small wrapper to run the txflow CLI with `python startcli.py ...`.

This forwards all command-line arguments to the `txflow.cli.main` entry
point so you can run the CLI from the repository root without installing
the package or using `python -m`.
"""
from __future__ import annotations

import sys

from txflow.cli import main


if __name__ == "__main__":
    # Pass through all args except the script name
    sys.exit(main(sys.argv[1:]))
