import sys

from predalgo._cli import main

sys.exit(main())
