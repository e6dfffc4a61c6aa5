from datetime import datetime
from typing import Optional

import attrs


@attrs.define
class SessionEntity:
    user_id: int
    token: str = attrs.field(repr=False)  # Hide from repr for security
    id: Optional[int] = None
    created_at: Optional[datetime] = None
