import os
import sys

# The modules live flat at the repository root; make them importable
# regardless of the directory pytest is started from.
REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)
