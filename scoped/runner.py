"""
Run actions between acquiring and releasing a resource.
"""

from __future__ import annotations

import logging
from typing import TypeVar, NoReturn, cast

from scoped.resource import Resource, Action, Error
from scoped.typing import threadsafe

_T = TypeVar("_T")


@threadsafe
def run(resource: Resource[_T], action: Action[_T]) -> Error:
    """
    Acquire a resource, run an action with the acquired value, and release the resource.

    The action only runs if acquisition succeeded. The resource is always released, and receives
    the acquisition's or the action's error, if there was one. Exceptions raised by the
    acquisition or the action are handled as if they had been returned.

    Return whatever the resource's release returns.
    """
    logger = logging.getLogger(__name__)

    logger.debug("Acquiring %r.", resource)
    try:
        value, error = resource.acquire()
    except Exception as acquisition_error:
        value, error = None, acquisition_error
    except BaseException as interruption:
        _release_and_interrupt(resource, None, interruption)

    if error is None:
        try:
            error = action(cast(_T, value))
        except Exception as action_error:
            error = action_error
        except BaseException as interruption:
            _release_and_interrupt(resource, value, interruption)
    else:
        logger.debug("Could not acquire %r, so the action was skipped: %r", resource, error)

    logger.debug("Releasing %r.", resource)
    released_error = resource.release(value, error)
    if released_error is not error:
        logger.debug("Releasing %r changed the error from %r to %r.", resource, error, released_error)
    return released_error


def _release_and_interrupt(
    resource: Resource[_T], value: _T | None, interruption: BaseException
) -> NoReturn:
    logging.getLogger(__name__).debug("Releasing %r after an interruption: %r", resource, interruption)
    resource.release(value, interruption)
    raise interruption
