from datetime import datetime
from typing import Optional

import attrs


@attrs.define
class EnrollmentEntity:
    user_id: int
    name: str
    cpf: str = attrs.field(repr=False)  # Hide personal document number from logs
    birthday: datetime
    phone: str = attrs.field(repr=False)
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
