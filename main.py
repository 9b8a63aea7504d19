"""Main entry point for the post renderer."""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), "src"))

from page.app import main  # noqa: E402

if __name__ == "__main__":
    main()
