import sys

from setalgebra._cli import main

sys.exit(main())
