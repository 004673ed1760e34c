"""Process-wide options for the bip21 package.

Options are meant to be set once at initialization time::

    import bip21

    bip21.configure(allow_non_text_values=True)
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Iterator

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


class Bip21Config(BaseModel):
    """Options table.

    Attributes:
        allow_non_text_values: Enables byte-oriented ``Param`` construction and
            conversions. BIP21 mandates UTF-8 values, so this is off by default.
        integrate_platform_errors: Chain collaborator errors (address, amount,
            percent-decoding) to structure errors through ``__cause__``. When
            disabled the cause is folded into the error message instead.
    """

    allow_non_text_values: bool = False
    integrate_platform_errors: bool = True

    model_config = ConfigDict(frozen=True, extra="forbid")


_config = Bip21Config()
_override: ContextVar[Bip21Config | None] = ContextVar("bip21_config_override", default=None)


def get_config() -> Bip21Config:
    """Return the active configuration.

    An ``override_config`` block active in the current context takes
    precedence over the process-wide configuration.
    """
    override = _override.get()
    return override if override is not None else _config


def configure(**options: Any) -> Bip21Config:
    """Replace the active configuration.

    Options not given keep their current value. Inside ``override_config``
    only the override is replaced, until the block exits.

    Args:
        **options: Fields of ``Bip21Config``

    Returns:
        The new active configuration

    Raises:
        pydantic.ValidationError: If an option is unknown or has the wrong type
    """
    global _config
    config = Bip21Config.model_validate({**get_config().model_dump(), **options})
    if _override.get() is not None:
        _override.set(config)
    else:
        _config = config
    logger.debug(f"bip21 configured: {config!r}")
    return config


@contextmanager
def override_config(**options: Any) -> Iterator[Bip21Config]:
    """Temporarily apply ``options`` in the current context.

    Other threads and asyncio tasks started outside the block keep seeing the
    process-wide configuration.
    """
    config = Bip21Config.model_validate({**get_config().model_dump(), **options})
    token = _override.set(config)
    try:
        yield config
    finally:
        _override.reset(token)
