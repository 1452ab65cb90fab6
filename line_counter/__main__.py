import sys

from .cli.count_lines import main

sys.exit(main())
