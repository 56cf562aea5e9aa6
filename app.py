import sys
from pathlib import Path

from wbr.cli import main as cli_main


def main() -> int:
    prog = Path(sys.argv[0]).name if sys.argv and sys.argv[0] else "wbr"
    return cli_main(sys.argv[1:], prog=prog)


if __name__ == "__main__":
    raise SystemExit(main())
