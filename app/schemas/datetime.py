from datetime import datetime
from typing import Annotated

from pydantic import PlainSerializer

from app.utils.helpers import to_iso

# Serialized as ISO-8601 UTC with a trailing "Z", e.g. "2026-10-19T08:30:00.123456Z"
UtcDatetime = Annotated[datetime, PlainSerializer(to_iso, return_type=str, when_used="always")]
