#!/usr/bin/env python3
"""
GitHub Contributor Synopsis

Run from a checkout without installing:
  python github-contributors.py --repo name --user owner ...

See `python github-contributors.py --help` for every option.
"""

from ghcontributors.cli import main

if __name__ == "__main__":
    main()
