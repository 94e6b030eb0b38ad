import sys

from portals.cli.main import main

sys.exit(main())
