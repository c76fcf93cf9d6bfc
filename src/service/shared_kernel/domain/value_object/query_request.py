import re
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Tuple

import attrs

from src.platform.exception.exceptions import QueryError


_SCALAR_PARAM_TYPES = (str, int, bool, Decimal, date, datetime)


def _validate_params(instance: 'QueryRequest', attribute: attrs.Attribute, value: Tuple) -> None:
    for position, param in enumerate(value, start=1):
        if param is not None and not isinstance(param, _SCALAR_PARAM_TYPES):
            raise QueryError(
                f'Parameter ${position} of {instance.name} has unsupported type '
                f'{type(param).__name__}'
            )
    indexes = {int(n) for n in re.findall(r'\$(\d+)', instance.sql)}
    if indexes != set(range(1, len(value) + 1)):
        used = ', '.join(f'${n}' for n in sorted(indexes)) or 'none'
        raise QueryError(
            f'{instance.name} binds {len(value)} parameters but uses placeholders {used}'
        )


@attrs.frozen
class QueryRequest:
    """
    Parameterized read request handed to a row source.

    `sql` holds only positional placeholders ($1, $2, ...); every caller-supplied
    value travels in `params`.
    """

    name: str
    sql: str
    params: Tuple[Any, ...] = attrs.field(default=(), converter=tuple, validator=_validate_params)
