"""Allow ``python -m cli`` as an alias for the ``codehtml`` script."""

import sys

from cli.main import main

sys.exit(main())
