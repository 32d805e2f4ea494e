import argparse
import json
from pathlib import Path

from openapi_spec_validator import validate

REQUIRED_PATHS = ("/health", "/countries", "/countries/lookup", "/countries/normalize")


def main() -> None:
    parser = argparse.ArgumentParser(description="Validate a generated OpenAPI schema.")
    parser.add_argument("--spec", required=True)
    args = parser.parse_args()

    spec = json.loads(Path(args.spec).read_text())
    validate(spec)

    missing = [path for path in REQUIRED_PATHS if path not in spec.get("paths", {})]
    if missing:
        raise SystemExit(f"OpenAPI schema is missing paths {missing}")


if __name__ == "__main__":
    main()
