# topmark:header:start
#
#   project      : BBContent
#   file         : engine.py
#   file_relpath : src/bbcontent/resolver/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Attribute resolver: permission gate → rule set → serializer.

Typical usage from a template helper:

    resolver = AttributeResolver.from_config(config, authorization=security)
    attrs = resolver(node, context=RenderContext(mode="edit"), options={"class": "x"})
    html = f"<div{attrs}>...</div>"

Resolution modes:
  - *granted*: the actor may view the node; only ``class="bb-content"`` is emitted.
  - *not granted*: the full rule set runs (see [`bbcontent.rules.ruleset`][]).

The resolver holds no per-call data. Every call builds its own
`ResolutionState`, so a single instance can be shared between threads.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from bbcontent.attributes.keys import ClassToken
from bbcontent.attributes.serializer import serialize_attributes
from bbcontent.config import Config
from bbcontent.config.logging import get_logger
from bbcontent.errors import MissingContentError
from bbcontent.resolver.options import ResolutionOptions
from bbcontent.resolver.state import ResolutionState
from bbcontent.rules.ruleset import DEFAULT_RULES
from bbcontent.security.gate import PermissionGate

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from bbcontent.config.logging import BBContentLogger
    from bbcontent.content.contracts import ContentLike
    from bbcontent.render.context import RenderContext
    from bbcontent.rules.contracts import Rule
    from bbcontent.security.authorization import AuthorizationService

logger: BBContentLogger = get_logger(__name__)


@dataclass(frozen=True)
class AttributeResolver:
    """Compute the HTML attributes of a content node.

    Attributes:
        gate (PermissionGate): Selects the resolution mode.
        config (Config): Runtime configuration.
        rules (Sequence[Rule]): Ordered rules for the not-granted path.
    """

    gate: PermissionGate
    config: Config
    rules: Sequence[Rule] = DEFAULT_RULES

    @classmethod
    def from_config(
        cls,
        config: Config | None = None,
        *,
        authorization: AuthorizationService,
    ) -> AttributeResolver:
        """Build a resolver wired to ``authorization`` using ``config``.

        Args:
            config (Config | None): Runtime configuration (defaults when None).
            authorization (AuthorizationService): External authorization service.

        Returns:
            AttributeResolver: A resolver with the default rule set.
        """
        cfg: Config = config or Config.from_defaults()
        return cls(gate=PermissionGate(authorization, action=cfg.view_action), config=cfg)

    def compute(
        self,
        node: ContentLike | None = None,
        *,
        context: RenderContext,
        options: Mapping[str, Any] | ResolutionOptions | None = None,
    ) -> ResolutionState:
        """Resolve ``node`` and return the full per-call state.

        Args:
            node (ContentLike | None): Node to resolve; defaults to
                ``context.current_object``.
            context (RenderContext): Render state snapshot.
            options (Mapping[str, Any] | ResolutionOptions | None): Per-call options
                (``class``, ``dropzone``, ``draggable``).

        Returns:
            ResolutionState: The state after the selected path ran.

        Raises:
            MissingContentError: If no node is given and the context has none.
            InvalidOptionsError: If ``options`` or the class render param is malformed.
        """
        resolved_options: ResolutionOptions = ResolutionOptions.from_mapping(options)

        target: ContentLike | None = node if node is not None else context.current_object
        if target is None:
            raise MissingContentError(
                "No content node given and the render context has no current object"
            )

        state = ResolutionState(
            node=target,
            context=context,
            options=resolved_options,
            config=self.config,
        )

        state.granted = self.gate.is_granted(target)
        if state.granted:
            logger.debug("Resolve %s: granted path", target.uid)
            state.attributes.add_class(ClassToken.CONTENT)
            return state

        logger.debug("Resolve %s: full rule set (%d rules)", target.uid, len(self.rules))
        for rule in self.rules:
            state = rule(state)
        return state

    def resolve(
        self,
        node: ContentLike | None = None,
        *,
        context: RenderContext,
        options: Mapping[str, Any] | ResolutionOptions | None = None,
    ) -> str:
        """Resolve ``node`` and return its serialized attribute string.

        See `compute` for arguments and errors.

        Returns:
            str: `` name="value"`` pairs ready to be placed inside an opening tag.
        """
        state: ResolutionState = self.compute(node, context=context, options=options)
        return serialize_attributes(state.attributes)

    def __call__(
        self,
        node: ContentLike | None = None,
        *,
        context: RenderContext,
        options: Mapping[str, Any] | ResolutionOptions | None = None,
    ) -> str:
        """Alias of `resolve`, so the resolver can be registered as a template helper."""
        return self.resolve(node, context=context, options=options)
