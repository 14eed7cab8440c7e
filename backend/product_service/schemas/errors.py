"""Error Envelope: the body of every non-2xx response."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ErrorResponse(BaseModel):
    """{path, message, statusCode, timestamp}."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    path: str
    message: str
    status_code: int
    timestamp: datetime
