import sys

from branch_protection_report.cli import main

sys.exit(main())
