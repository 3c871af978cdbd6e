#file: aqi_cli/__main__.py

import sys

from aqi_cli.main import main

sys.exit(main())
