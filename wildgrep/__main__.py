import sys

from wildgrep.cli import main

sys.exit(main())
