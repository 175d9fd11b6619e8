import sys

from office_templater.cli import main

sys.exit(main())
