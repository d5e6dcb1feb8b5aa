#!/usr/bin/env python3
"""
RetailStack Search - command line entry point

    python main.py --catalog products.json search "apple"
    python main.py --catalog products.json tags cluster --map
"""

from retailsearch.cli import main


if __name__ == '__main__':
    main()
