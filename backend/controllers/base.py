"""
Shared pieces for catalog controllers.
"""
import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from domain.errors import StorageError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class Render:
    """Render a content template inside the shared layout."""
    template: str
    context: Dict[str, Any] = field(default_factory=dict)
    status_code: int = 200


@dataclass
class Redirect:
    url: str
    status_code: int = 303


class BaseController:
    """Runs repository calls off the event loop, one session per call."""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def _call(self, fn: Callable[..., T], *args: Any) -> T:
        with self.session_factory() as session:
            try:
                return fn(session, *args)
            except SQLAlchemyError as exc:
                session.rollback()
                logger.exception("Database call %s failed", getattr(fn, "__name__", fn))
                raise StorageError(str(exc)) from exc

    async def run(self, fn: Callable[..., T], *args: Any) -> T:
        return await asyncio.to_thread(self._call, fn, *args)

    async def run_both(self, first: tuple, second: tuple) -> tuple:
        """Issue two independent reads concurrently and wait for both."""
        return tuple(await asyncio.gather(self.run(*first), self.run(*second)))
