"""
Test configuration for netpay tests.

Puts the project root on sys.path so 'from netpay...' resolves whether or not the
package is installed, and whether pytest runs from the root or from netpay/.
"""
import sys
from pathlib import Path

_project_root = Path(__file__).parent.parent.parent    # .../<repo>/

if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))
