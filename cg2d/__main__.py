import sys

from cg2d.cli import main

sys.exit(main())
