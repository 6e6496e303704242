# Qt Application Entry Point
#
# Runs one of the bundled demo sketches.
#
# Usage:
#     python -m qturtle.qt.app [tree|polygons|spiral|steer] [-v]
#   or, once installed:
#     qturtle-demo spiral

import logging
import sys

from .. import utils_core as Utils
from ..demos import DEMOS

DEFAULT_DEMO = "tree"


def usage():
    names = "|".join(sorted(DEMOS))
    return f"usage: {Utils.__prg__}-demo [{names}] [-v]"


def main(argv=None):
    """Pick a demo from the command line and run it."""
    if argv is None:
        argv = sys.argv[1:]
    verbose = "-v" in argv
    args = [a for a in argv if not a.startswith("-")]

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(threadName)s: %(message)s",
    )

    name = args[0] if args else DEFAULT_DEMO
    if name not in DEMOS:
        print(usage(), file=sys.stderr)
        return 2

    logging.info("%s %s: running %s demo", Utils.__prg__, Utils.__version__, name)
    DEMOS[name]().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
