"""Allow ``python -m bintotxt`` as an alias for the ``bintotxt`` command."""

import sys

from .cli import main

sys.exit(main())
