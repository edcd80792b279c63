import sys

from hash_spread.cli import main

sys.exit(main())
