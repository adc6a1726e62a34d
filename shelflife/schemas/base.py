from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..core.utils import to_utc

# Stored timestamps are naive UTC; responses carry the offset explicitly.
UtcDateTime = Annotated[datetime, AfterValidator(to_utc)]


class ApiModel(BaseModel):
    """camelCase on the wire, snake_case in Python. Both spellings accepted on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
