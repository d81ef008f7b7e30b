"""Allow running as ``python -m spawn_workspace``."""

import sys

from spawn_workspace.cli.main import main

sys.exit(main())
