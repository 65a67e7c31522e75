import sys

from py_vers_range.cli import main

sys.exit(main())
