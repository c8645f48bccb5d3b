"""Allow ``python -m tile_converter``"""

import sys

from .converter import main

sys.exit(main())
