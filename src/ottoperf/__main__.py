"""Allow running the calculator with ``python -m ottoperf``."""

import sys

from ottoperf.main import main

sys.exit(main())
