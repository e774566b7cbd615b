import logging
from typing import Any, Optional

from .core import QueryRequest
from .operations import OPERATIONS

logger = logging.getLogger(__name__)


def build_request(operation: str, params: Optional[Any] = None) -> QueryRequest:
    """
    Build a transport-ready request for a registered operation.

    Args:
        operation: Operation name, e.g. "SearchMedia"
        params: Instance of the operation's params model. May be omitted
            for operations whose params model has no required fields.

    Returns:
        QueryRequest with every known variable marked present or absent
    """
    if operation not in OPERATIONS:
        raise ValueError(f"Unknown operation '{operation}'")

    op = OPERATIONS[operation]
    if params is None:
        params = op.params_type()
    elif type(params) is not op.params_type:
        raise TypeError(
            f"Operation '{operation}' expects {op.params_type.__name__}, "
            f"got {type(params).__name__}")

    request = QueryRequest(
        operation=operation,
        document=op.document,
        fields=op.build(params),
    )
    logger.debug(f"Built {operation} request with fields {request.present_fields()}")
    return request
