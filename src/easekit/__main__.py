import sys

from easekit.cli import main

sys.exit(main())
