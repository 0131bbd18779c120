import sys

from create_uikit.cli import main

sys.exit(main())
