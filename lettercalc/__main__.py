import sys

from lettercalc.cli import main

sys.exit(main())
