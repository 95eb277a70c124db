"""Command that writes the Petstore sample descriptions to files."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional, Sequence

import yaml

from oaspec.petstore_v2 import build_document_v2
from oaspec.petstore_v3 import build_document_v3

EXIT_USAGE_ERROR = 255

V2_OUTPUT = "petstore-v2.yaml"
V3_OUTPUT = "petstore-v3.yaml"


def usage(program: str) -> str:
    """Return the usage text for the command."""
    return (
        f"\nUsage: {os.path.basename(program)} [OPTIONS]\n"
        "Options:\n"
        "  --v2\n"
        "    Generate an OpenAPI v2 description.\n"
        "  --v3\n"
        "    Generate an OpenAPI v3 description.\n"
    )


def _write(path: str, document: dict) -> None:
    Path(path).write_text(
        yaml.safe_dump(document, sort_keys=False), encoding="utf-8"
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Write the requested descriptions; v2 is written when none is asked for."""
    args = sys.argv[1:] if argv is None else list(argv)
    program = sys.argv[0] if sys.argv and sys.argv[0] else "petstore-builder"

    want_v2 = False
    want_v3 = False
    for arg in args:
        if arg == "--v2":
            want_v2 = True
        elif arg == "--v3":
            want_v3 = True
        else:
            print(f"Unknown option: {arg}.\n{usage(program)}")
            return EXIT_USAGE_ERROR

    if not want_v2 and not want_v3:
        want_v2 = True

    if want_v2:
        _write(V2_OUTPUT, build_document_v2())
    if want_v3:
        _write(V3_OUTPUT, build_document_v3())
    return 0


if __name__ == "__main__":
    sys.exit(main())