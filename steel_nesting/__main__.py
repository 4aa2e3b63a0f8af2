# steel_nesting/__main__.py
# Package entrypoint so you can run:
#   python -m steel_nesting --help
#
# Examples:
#   python -m steel_nesting --lines lines.csv
#   python -m steel_nesting --job job.json --out out/ --png cutting.png

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    main()
