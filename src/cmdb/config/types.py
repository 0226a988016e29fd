"""Configuration type definitions for cmdb settings.

- FlattenConfig: which array shapes the flattener accepts
"""

import pydantic as _pydantic


class FlattenConfig(_pydantic.BaseModel):
    """
    Options controlling which leaf shapes the flattener accepts.

    Attributes:
        mixed_boolean_arrays: Accept boolean arrays that mix true and false.
            When False, a boolean array must repeat one value ([true, true]).
        empty_arrays: Accept empty arrays as leaf values.
    """

    model_config = _pydantic.ConfigDict(frozen=True, extra="forbid")

    mixed_boolean_arrays: bool = True
    empty_arrays: bool = True
