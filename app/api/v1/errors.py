from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import HTTPException

from app.application.exceptions import (
    AuthenticationError,
    ForbiddenError,
    LLMContractError,
    LLMUpstreamError,
    NotFoundError,
    StorageError,
)


logger = logging.getLogger(__name__)


@contextmanager
def http_errors() -> Iterator[None]:
    """Translate application exceptions raised inside a route into HTTP errors."""
    try:
        yield
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except AuthenticationError as e:
        raise HTTPException(status_code=401, detail=str(e))
    except ForbiddenError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except (LLMUpstreamError, LLMContractError) as e:
        logger.warning("Question generation failed", extra={"reason": str(e)})
        raise HTTPException(status_code=502, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=502, detail=str(e))
