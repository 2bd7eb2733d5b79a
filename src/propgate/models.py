"""Base Pydantic model for propgate.

Every schema, validator and result model inherits from this class so that
they share one configuration:

- Strict field validation (no extra fields allowed)
- Immutable instances, safe to share between threads and calls

Example:
    >>> from propgate.models import PropgateBaseModel
    >>>
    >>> class Limits(PropgateBaseModel):
    ...     low: int
    ...     high: int
    >>>
    >>> Limits(low=0, high=10).model_dump()
    {'low': 0, 'high': 10}
"""

from pydantic import BaseModel, ConfigDict


class PropgateBaseModel(BaseModel):
    """Base model for all propgate Pydantic models.

    - extra="forbid": Rejects any fields not defined in the model
    - frozen=True: Makes instances immutable
    """

    model_config = ConfigDict(extra="forbid", frozen=True)
