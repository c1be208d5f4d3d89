from __future__ import annotations

import sys

from include_folder.main import main

sys.exit(main())
