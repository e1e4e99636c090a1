import sys

from loguniform.cli import main

sys.exit(main())
