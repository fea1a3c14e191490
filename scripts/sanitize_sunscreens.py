"""Sanitize a JSON file of sunscreen submissions and report warnings."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from config import settings
from services.catalog_loader import get_default_catalog, load_filter_catalog
from services.sunscreen_batch import BatchResult, sanitize_sunscreens, sort_by_brand_product

logger = logging.getLogger(__name__)


def load_submissions(path: Path) -> List[Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a JSON array of submissions")
    return data


def write_json(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)
        f.write("\n")


def exit_code(batch: BatchResult, strict: bool) -> int:
    return 1 if strict and batch.failures else 0


def run(
    input_path: Path,
    catalog_path: Optional[str] = None,
    output_path: Optional[Path] = None,
    report_path: Optional[Path] = None,
    strict: bool = False,
) -> int:
    catalog = load_filter_catalog(catalog_path) if catalog_path else get_default_catalog()

    batch = sanitize_sunscreens(load_submissions(input_path), catalog)

    if output_path:
        write_json(output_path, sort_by_brand_product(batch.sanitized_records()))
        logger.info(f"✓ Wrote {len(batch.results)} sanitized records to {output_path}")
    if report_path:
        write_json(report_path, batch.to_report().model_dump(mode="json"))
        logger.info(f"✓ Wrote report to {report_path}")

    for failure in batch.failures:
        logger.error(f"✗ #{failure.index} (id={failure.id}): {failure.error}: {failure.message}")
    return exit_code(batch, strict)


def main() -> None:
    parser = argparse.ArgumentParser(description="Sanitize sunscreen submissions")
    parser.add_argument(
        "input",
        nargs="?",
        default=settings.sunscreens_data_path,
        help="JSON array of submissions (default: %(default)s)",
    )
    parser.add_argument("--catalog", help="YAML or JSON UV filter catalog to use instead of the built-in one")
    parser.add_argument("--output", default=settings.sanitized_output_path, help="Write sanitized records here")
    parser.add_argument("--report", help="Write warnings and failures here")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any submission is rejected",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if settings.debug else settings.log_level.upper())

    try:
        code = run(
            Path(args.input),
            catalog_path=args.catalog,
            output_path=Path(args.output) if args.output else None,
            report_path=Path(args.report) if args.report else None,
            strict=args.strict,
        )
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"✗ Sanitation failed: {e}")
        code = 1
    sys.exit(code)


if __name__ == "__main__":
    main()
