import sys

from docindex.cli import main

sys.exit(main())
