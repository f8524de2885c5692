import sys

from snapshot_analyzer.app import main

if __name__ == "__main__":
    sys.exit(main())
