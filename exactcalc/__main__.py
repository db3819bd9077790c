import sys

from exactcalc.cli import main

sys.exit(main())
