"""Allow chaincmd to be run as a module.

This enables running the CLI with `python -m chaincmd`.
"""

from chaincmd.app import main

if __name__ == "__main__":
    main()
