"""
Script di esecuzione del parser mailstrip.

Legge:
  - uno o più file di testo con il corpo plain-text di una email

Produce:
  - <file><MAILSTRIP_REPORT_SUFFIX>  (default: <file>.fragments.json)

Uso:
  python run_mailstrip.py email_1.txt [email_2.txt ...]
"""
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from mailstrip.config import settings
from mailstrip.exceptions import LineTooLongError
from mailstrip.parsing.output_builder import build_email_report, validate_email_report
from mailstrip.parsing.pipeline import parse

logger = logging.getLogger("run_mailstrip")


def report_path_for(input_path: Path) -> Path:
    return input_path.with_name(input_path.name + settings.REPORT_SUFFIX)


def process_file(input_path: Path) -> dict:
    """Parse one body file, write its report beside it and return the report."""
    logger.info("Caricamento input: %s", input_path)
    text = input_path.read_text(encoding="utf-8")

    email = parse(text)
    report = build_email_report(email, source=str(input_path))

    validation = validate_email_report(report)
    for warning in validation.warnings:
        logger.warning("%s: %s", input_path.name, warning)
    validation.raise_if_invalid(str(input_path))

    output_path = report_path_for(input_path)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(report, f, ensure_ascii=False, indent=2)

    logger.info("Output salvato in: %s", output_path)
    return report


def print_summary(path: Path, report: dict) -> None:
    print("\n" + "=" * 70)
    print(f"MAILSTRIP — {path.name}")
    print("=" * 70)
    print(f"Fragments   : {report['fragment_count']}")
    for fragment in report["fragments"]:
        flags = [
            name
            for name in ("quoted", "signature", "forwarded", "hidden")
            if fragment[name]
        ]
        first_line = fragment["content"].strip().split("\n", 1)[0][:40]
        print(f"  [{fragment['index']:2d}] {','.join(flags) or 'visible':28s} {first_line}")

    print("\nVisible reply:")
    print(report["visible_text"] or "(empty)")
    print("=" * 70 + "\n")


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print(__doc__, file=sys.stderr)
        return 2

    # -----------------------------------------------------------------------
    # Setup logging
    # -----------------------------------------------------------------------
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
        stream=sys.stdout,
    )

    exit_code = 0
    for arg in args:
        path = Path(arg)
        try:
            report = process_file(path)
        except LineTooLongError as e:
            logger.error("%s: %s", path, e.message)
            exit_code = 1
            continue
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Impossibile leggere %s: %s", path, e)
            exit_code = 1
            continue
        print_summary(path, report)

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
