"""Run minigrep with ``python -m minigrep QUERY FILE_PATH``.

Exits with 0 after a search (even one with no matching lines) and with 1 when
an argument is missing, a settings file is invalid or the file cannot be read.
"""

import sys

from minigrep.cli import main

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
