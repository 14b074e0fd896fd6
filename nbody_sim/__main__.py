"""Allow ``python -m nbody_sim T dt < input.txt``."""

import sys
from nbody_sim.cli.main import main

sys.exit(main())
