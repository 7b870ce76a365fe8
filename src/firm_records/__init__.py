"""firm_records package.

Assembles immutable records describing SEC-registered investment adviser
firms (regulatory identifiers, address, contact and filing attributes) as
they appear in IAPD firm feeds.

Architecture:
- `FirmRecordBuilder` accumulates field values from a feed parser
- `FirmRecord` is the frozen Pydantic snapshot produced by `build()`
- Settings are read from the environment (and `.env`) by `get_settings`
"""

from firm_records.builder import FirmRecordBuilder, new_builder
from firm_records.models import FIRM_RECORD_FIELDS, FIRM_RECORD_LABELS, FirmRecord

__all__ = [
    "FIRM_RECORD_FIELDS",
    "FIRM_RECORD_LABELS",
    "FirmRecord",
    "FirmRecordBuilder",
    "new_builder",
    "__version__",
]
__version__ = "0.1.0"
