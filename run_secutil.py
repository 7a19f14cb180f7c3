import sys

from secutil import random_id
from secutil.cli import main

if __name__ == "__main__":
    if len(sys.argv) > 1:
        sys.exit(main())
    print("\n[secutil random identifier]")
    print(f"Generated id: {random_id(20)}\n")
