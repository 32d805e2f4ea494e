import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import pandas as pd

from country_normalizer.errors import CountryNormalizerError
from country_normalizer.index.country_index import CountryIndex
from country_normalizer.loaders.dataset_loader import load_country_index

logger = logging.getLogger(__name__)

OUTPUT_COLUMNS = [
    "country_alpha2",
    "country_alpha3",
    "country_fifa",
    "country_ioc",
    "country_numeric",
    "country_name",
]
UNMATCHED = "unmatched"


def _resolve_row(index: CountryIndex, value) -> Dict[str, object]:
    country = index.normalize_country(value) if isinstance(value, str) else None
    if country is None:
        return {column: None for column in OUTPUT_COLUMNS}
    return {
        "country_alpha2": country.alpha2,
        "country_alpha3": country.alpha3,
        "country_fifa": country.fifa.strip() or None,
        "country_ioc": country.ioc.strip() or None,
        "country_numeric": country.numeric,
        "country_name": country.short,
    }


def _drop_skipped(frame: pd.DataFrame, column: str, skip: Iterable[str]) -> pd.DataFrame:
    skipped = {value.strip().lower() for value in skip}
    if not skipped:
        return frame
    mask = frame[column].astype(str).str.strip().str.lower().isin(skipped)
    return frame[~mask]


def normalize_frame(frame: pd.DataFrame, column: str, index: CountryIndex) -> pd.DataFrame:
    if column not in frame.columns:
        raise KeyError(f"Column '{column}' not found in input")
    resolved = pd.DataFrame(
        [_resolve_row(index, value) for value in frame[column]],
        columns=OUTPUT_COLUMNS,
        index=frame.index,
    )
    resolved["country_numeric"] = resolved["country_numeric"].astype("Int64")
    return pd.concat([frame, resolved], axis=1)


def tally_frame(frame: pd.DataFrame, column: str, index: CountryIndex) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    unmatched = 0
    for value in frame[column]:
        country = index.normalize_country(value) if isinstance(value, str) else None
        if country is None:
            unmatched += 1
            continue
        counts[country.alpha2] = counts.get(country.alpha2, 0) + 1
    tally = dict(sorted(counts.items()))
    tally[UNMATCHED] = unmatched
    return tally


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Resolve free-text country names in a CSV column to country codes."
    )
    parser.add_argument("input", help="CSV file to read")
    parser.add_argument("--column", required=True, help="Column holding country names")
    parser.add_argument("--output", help="Write the enriched CSV here instead of stdout")
    parser.add_argument(
        "--tally",
        action="store_true",
        help="Print row counts per alpha-2 code instead of writing a CSV",
    )
    parser.add_argument(
        "--skip",
        action="append",
        default=[],
        help="Value to leave out of the run (repeatable, case-insensitive)",
    )
    parser.add_argument("--dataset", help="Country dataset to use instead of the bundled one")
    parser.add_argument("--locale", help="Locale of the dataset and normalization rules")
    parser.add_argument("--log-level", default="WARNING")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    try:
        index = load_country_index(
            Path(args.dataset) if args.dataset else None, locale=args.locale
        )
    except CountryNormalizerError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    frame = pd.read_csv(args.input, dtype=str, keep_default_na=False)
    if args.column not in frame.columns:
        print(f"error: column '{args.column}' not found in {args.input}", file=sys.stderr)
        return 2
    frame = _drop_skipped(frame, args.column, args.skip)

    if args.tally:
        for code, count in tally_frame(frame, args.column, index).items():
            print(f"{code}\t{count}")
        return 0

    result = normalize_frame(frame, args.column, index)
    matched = int(result["country_alpha2"].notna().sum())
    logger.info(
        "Normalized csv input=%s rows=%d matched=%d unmatched=%d",
        args.input,
        len(result),
        matched,
        len(result) - matched,
    )
    if args.output:
        result.to_csv(args.output, index=False)
    else:
        result.to_csv(sys.stdout, index=False)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
