"""Translation of domain errors into HTTP errors for the routers."""

from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import HTTPException, status

from community_market.core.errors import (
    DuplicateSlugError,
    InvalidRequestError,
    NotFoundError,
)


@contextmanager
def http_errors() -> Iterator[None]:
    """Re-raise domain errors from a service call as ``HTTPException``.

    Anything else propagates and is answered with a 500 by the request
    logging middleware.
    """
    try:
        yield
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except DuplicateSlugError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    except InvalidRequestError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
