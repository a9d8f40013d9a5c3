import json
import logging
import os
import sys
from pathlib import Path

from api.services.style_service import build_daily_style


def main() -> None:
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "WARNING").upper())
    in_path = Path(sys.argv[1])
    out_path = Path(sys.argv[2])
    data = json.loads(in_path.read_text(encoding="utf-8"))
    try:
        output = build_daily_style(data)
    except (TypeError, ValueError) as exc:
        print(f"Invalid request: {exc}", file=sys.stderr)
        sys.exit(2)
    out_path.write_text(json.dumps(output, indent=2, ensure_ascii=False), encoding="utf-8")
    print(f"Wrote style brief → {out_path}")


if __name__ == "__main__":
    if len(sys.argv) < 3:
        print("Usage: python cli.py input.json output.json")
        sys.exit(1)
    main()
