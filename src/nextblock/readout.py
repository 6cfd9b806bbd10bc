"""CLI entry point for a block readout.

Pass a block height (and optionally weight and tx count), then run:
    uv run python src/nextblock/readout.py 901152 3993000 3200

Set NEXTBLOCK_SAVE_CHART=1 to also write the tide chart under results/.
"""

import logging
import os
import sys

from dotenv import load_dotenv

load_dotenv()

from nextblock.delta import InvalidHeightError, parse_height  # noqa: E402
from nextblock.i18n import t  # noqa: E402
from nextblock.models import Block  # noqa: E402
from nextblock.narrative import describe_block  # noqa: E402
from nextblock.telescope import run  # noqa: E402

DEFAULT_HEIGHT = 901152


def main(argv: list[str] | None = None) -> int:
    """Print the readout for the block given in argv. Returns the exit code."""
    argv = sys.argv[1:] if argv is None else argv
    lang = os.environ.get("NEXTBLOCK_LANG", "en")

    try:
        height = parse_height(argv[0]) if argv else DEFAULT_HEIGHT
        weight, tx_count = (int(a) for a in (argv[1:3] + ["0", "0"])[:2])
    except (InvalidHeightError, ValueError) as e:
        print(t("error_height", lang).format(error=e), file=sys.stderr)
        return 2

    telescope = run(Block(height=height, weight=weight, tx_count=tx_count))
    for line in describe_block(telescope, lang):
        print(line)

    if os.environ.get("NEXTBLOCK_SAVE_CHART"):
        from nextblock.renderers.static import save_tide_chart

        path = save_tide_chart(telescope)
        print(t("saved", lang).format(path=path))
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=os.environ.get("NEXTBLOCK_LOG_LEVEL", "WARNING").upper())
    sys.exit(main())
