"""Entry point for ``python -m pair_sampler``."""

import sys

from pair_sampler.benchmark import main

sys.exit(main())
