from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

# Allow running this file directly (so `import abjad_api...` works without installing).
PROJECT_ROOT = str(Path(__file__).resolve().parents[1])
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from abjad_api.abjad import AbjadSystem, get_table
from abjad_api.destiny import analyze_name
from abjad_api.errors import InvalidInput

COLUMNS = ("name", "arabic", "total", "saghir", "element", "burj", "mother_name", "combined_total", "personal_burj")


def _parse_line(line: str) -> tuple[str, str | None]:
    """`name` or `name;mother`."""
    name, _, mother = line.partition(";")
    return name.strip(), (mother.strip() or None)


def _row(name: str, mother: str | None, table) -> dict:
    d = analyze_name(name, mother, table=table)
    return {
        "name": d.name,
        "arabic": d.arabic,
        "total": d.kabir,
        "saghir": d.saghir,
        "element": d.element.name,
        "burj": d.burj.name,
        "mother_name": d.personal.mother_name if d.personal else None,
        "combined_total": d.personal.combined_total if d.personal else None,
        "personal_burj": d.personal.burj.name if d.personal else None,
    }


def _read_lines(path: str) -> list[str]:
    if path == "-":
        return sys.stdin.read().splitlines()
    return Path(path).read_text(encoding="utf-8").splitlines()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compute abjad totals for a file of names.")
    parser.add_argument("names_file", help="UTF-8 file with one `name` or `name;mother` per line ('-' for stdin)")
    parser.add_argument(
        "--system",
        default=AbjadSystem.MAGHRIBI.value,
        choices=[s.value for s in AbjadSystem],
        help="Abjad value table",
    )
    parser.add_argument("--format", dest="fmt", default="tsv", choices=("tsv", "json"), help="Output format")
    args = parser.parse_args(argv)

    table = get_table(args.system)
    rows: list[dict] = []
    failed = 0

    for lineno, line in enumerate(_read_lines(args.names_file), start=1):
        # Blank lines and `#` comments are skipped.
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        name, mother = _parse_line(line)
        try:
            rows.append(_row(name, mother, table))
        except InvalidInput as e:
            failed += 1
            print(f"line {lineno}: {e}", file=sys.stderr)

    if args.fmt == "json":
        print(json.dumps(rows, ensure_ascii=False, indent=2))
    else:
        print("\t".join(COLUMNS))
        for row in rows:
            print("\t".join("" if row[c] is None else str(row[c]) for c in COLUMNS))

    return 0 if failed == 0 else 2


if __name__ == "__main__":
    raise SystemExit(main())
