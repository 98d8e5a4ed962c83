"""Build the Zuchtwert top-N workbook from the breed files configured in zwranker.config.CFG."""
import sys

from zwranker import run_pipeline
from zwranker.errors import ZwRankerError

try:
    run_pipeline()
except ZwRankerError as e:
    print(f"  ❌  {e}")
    sys.exit(1)
sys.exit(0)
