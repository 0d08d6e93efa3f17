"""Development entry point (without installing the package).

Runs the umbrella CLI with `python -m main input <day> [year]`,
`python -m main setup <day> [year]` or `python -m main doctor run`.

The code lives in `src/`, so without an editable install `cli`, `core`
and `adapters` are not importable.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    src = Path(__file__).resolve().parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
