# topmark:header:start
#
#   project      : BBContent
#   file         : state.py
#   file_relpath : src/bbcontent/resolver/state.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-call resolution state.

A `ResolutionState` bundles everything one resolution reads and writes. The
resolver creates a new instance at the start of every call and never stores it,
so concurrent calls on a shared resolver cannot observe each other.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from bbcontent.attributes.accumulator import AttributeAccumulator

if TYPE_CHECKING:
    from bbcontent.config import Config
    from bbcontent.content.contracts import ContentLike
    from bbcontent.render.context import RenderContext
    from bbcontent.resolver.options import ResolutionOptions


@dataclass
class ResolutionState:
    """Mutable state of a single resolution.

    Attributes:
        node (ContentLike): The node whose attributes are resolved.
        context (RenderContext): Render state snapshot.
        options (ResolutionOptions): Validated per-call options.
        config (Config): Runtime configuration.
        attributes (AttributeAccumulator): Attributes written so far.
        granted (bool | None): Permission gate decision, None until evaluated.
        applied_rules (list[str]): Names of the rules that ran, in order.
    """

    node: ContentLike
    context: RenderContext
    options: ResolutionOptions
    config: Config
    attributes: AttributeAccumulator = field(default_factory=AttributeAccumulator)
    granted: bool | None = None
    applied_rules: list[str] = field(default_factory=lambda: [])
