#!/usr/bin/env python3
"""
PR Triage
Sorts the open pull requests of a GitHub repository into triage categories
and writes them to a markdown report.
"""

import sys

from pr_triage.cli import main


if __name__ == "__main__":
    sys.exit(main())
