from __future__ import annotations

import uuid

# Sentinel id that no real row ever carries; "id != NIL_UUID" matches every row.
NIL_UUID = "00000000-0000-0000-0000-000000000000"


def new_uuid() -> str:
    return str(uuid.uuid4())
