import sys

from mnemonic.cli import main

sys.exit(main())
