import sys

from whitwell.cli import main

sys.exit(main())
