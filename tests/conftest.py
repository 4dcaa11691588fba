# topmark:header:start
#
#   project      : BBContent
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the BBContent test suite.

This file sets up global fixtures, typed wrappers for pytest decorators and the
logging configuration for test runs.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs using `bbcontent.config.MutableConfig` (mutable), then
      `freeze()` into a `bbcontent.config.Config` before passing them to the
      resolver.
    - Do **not** mutate a frozen `Config`. If you need to tweak one, call
      `Config.thaw()`, edit the returned `MutableConfig`, then `freeze()` again.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from bbcontent.config import Config, MutableConfig, logging
from bbcontent.content.model import ContentKind, ContentNode
from bbcontent.render.context import RenderContext
from bbcontent.resolver.engine import AttributeResolver
from bbcontent.resolver.options import ResolutionOptions
from bbcontent.resolver.state import ResolutionState
from bbcontent.security.authorization import StaticAuthorizationService

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]

CONTENT_NS = "BackBee\\ClassContent\\"


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`."""
    return as_typed_mark(pytest.fixture(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_bbcontent_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure BBContent's runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    BBCONTENT_LOG_LEVEL in their shell.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("BBCONTENT_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so rule tracing is exercised by every test.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and overrides.

    Args:
        **overrides (Any): `MutableConfig` field values to override.

    Returns:
        Config: The frozen configuration.
    """
    draft: MutableConfig = MutableConfig.from_defaults()
    for key, value in overrides.items():
        setattr(draft, key, value)
    return draft.freeze()


def plain(uid: str = "p1", short_type: str = "Article") -> ContentNode:
    """Return a plain (composite, non-container) content node."""
    return ContentNode(uid=uid, type_name=CONTENT_NS + short_type)


def container(
    uid: str = "c1",
    short_type: str = "ContentSet",
    *,
    accept: tuple[str, ...] = (),
    max_entries: int = 0,
) -> ContentNode:
    """Return a container content node."""
    return ContentNode(
        uid=uid,
        type_name=CONTENT_NS + short_type,
        kind=ContentKind.CONTAINER,
        accepted_child_types=accept,
        max_entries=max_entries,
    )


def element(uid: str = "e1", short_type: str = "Element\\Text") -> ContentNode:
    """Return an element leaf content node."""
    return ContentNode(uid=uid, type_name=CONTENT_NS + short_type, kind=ContentKind.ELEMENT)


def make_state(
    node: ContentNode,
    *,
    context: RenderContext | None = None,
    options: dict[str, Any] | None = None,
    config: Config | None = None,
) -> ResolutionState:
    """Return a fresh `ResolutionState` for exercising a single rule.

    Args:
        node (ContentNode): Node being resolved.
        context (RenderContext | None): Render context (empty when None).
        options (dict[str, Any] | None): Raw per-call options.
        config (Config | None): Runtime config (defaults when None).

    Returns:
        ResolutionState: The state, as the resolver would build it.
    """
    return ResolutionState(
        node=node,
        context=context or RenderContext(),
        options=ResolutionOptions.from_mapping(options),
        config=config or Config.from_defaults(),
    )


def make_resolver(
    *,
    granted: bool = False,
    session: bool = True,
    config: Config | None = None,
) -> AttributeResolver:
    """Return a resolver backed by a `StaticAuthorizationService`.

    Args:
        granted (bool): Grant VIEW on every node.
        session (bool): Whether an actor session is active.
        config (Config | None): Runtime config (defaults when None).

    Returns:
        AttributeResolver: The resolver.
    """
    return AttributeResolver.from_config(
        config,
        authorization=StaticAuthorizationService(session=session, grant_all=granted),
    )


@fixture()
def resolver() -> AttributeResolver:
    """Resolver on the not-granted path (active session, nothing granted)."""
    return make_resolver()
