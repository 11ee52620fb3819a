import sys

from lispi.cli import main

sys.exit(main())
