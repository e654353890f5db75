import sys

from wordfinder.cli import main

sys.exit(main())
