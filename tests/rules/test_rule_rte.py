# topmark:header:start
#
#   project      : BBContent
#   file         : test_rule_rte.py
#   file_relpath : tests/rules/test_rule_rte.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the rich-text-editor rule.

The rule only fires when the node is the exact default element occupying the
current slot of a non-container parent. Each test below breaks one condition.
"""

from __future__ import annotations

from typing import Any

from bbcontent.attributes.keys import AttrKey
from bbcontent.content.model import ContentKind, ContentNode
from bbcontent.render.context import RenderContext
from bbcontent.rules.rte import RteRule, lookup_rte_config
from tests.conftest import CONTENT_NS, element, make_config, make_state

RTE_OPTIONS: dict[str, dict[str, Any]] = {"title": {"parameters": {"rte": "lite"}}}


def _article(
    title: ContentNode | None,
    *,
    kind: ContentKind = ContentKind.PLAIN,
    default_options: dict[str, dict[str, Any]] | None = None,
) -> ContentNode:
    return ContentNode(
        uid="a1",
        type_name=CONTENT_NS + "Article",
        kind=kind,
        elements={"title": title} if title is not None else {},
        default_options=RTE_OPTIONS if default_options is None else default_options,
    )


def _rte(node: ContentNode, context: RenderContext, **config: Any) -> Any:
    state = make_state(node, context=context, config=make_config(**config) if config else None)
    return RteRule()(state).attributes.get(AttrKey.RTE_CONFIG)


def test_fires_for_default_slot_element() -> None:
    """All conditions hold: the slot's editor config is exposed."""
    title = element("t1")
    context = RenderContext(container_node=_article(title), current_slot_name="title")
    assert _rte(title, context) == "lite"


def test_matches_on_uid_not_identity() -> None:
    """A distinct object with the default node's uid still qualifies."""
    context = RenderContext(container_node=_article(element("t1")), current_slot_name="title")
    assert _rte(element("t1"), context) == "lite"


def test_suppressed_when_parent_is_container() -> None:
    """Container parents never expose an editor config."""
    title = element("t1")
    parent = _article(title, kind=ContentKind.CONTAINER)
    assert _rte(title, RenderContext(container_node=parent, current_slot_name="title")) is None


def test_suppressed_when_parent_is_not_content() -> None:
    """A non-content parent object is ignored."""
    title = element("t1")
    context = RenderContext(container_node="not a node", current_slot_name="title")
    assert _rte(title, context) is None


def test_suppressed_without_slot() -> None:
    """No current slot name means no default node to compare with."""
    title = element("t1")
    assert _rte(title, RenderContext(container_node=_article(title))) is None


def test_suppressed_when_slot_is_empty() -> None:
    """The slot has no default node."""
    context = RenderContext(container_node=_article(None), current_slot_name="title")
    assert _rte(element("t1"), context) is None


def test_suppressed_when_default_node_uid_differs() -> None:
    """Another node occupies the slot."""
    context = RenderContext(container_node=_article(element("t2")), current_slot_name="title")
    assert _rte(element("t1"), context) is None


def test_suppressed_when_node_is_not_element_content() -> None:
    """Same uid, but the resolved node is not an element leaf."""
    context = RenderContext(container_node=_article(element("t1")), current_slot_name="title")
    node = ContentNode(uid="t1", type_name=CONTENT_NS + "Element\\Text")
    assert _rte(node, context) is None


def test_applies_but_writes_nothing_without_config() -> None:
    """Missing ``parameters.rte`` leaves the attribute unset."""
    title = element("t1")
    parent = _article(title, default_options={"title": {"parameters": {}}})
    state = make_state(title, context=RenderContext(container_node=parent, current_slot_name="title"))
    state = RteRule()(state)
    assert state.applied_rules == ["RteRule"]
    assert AttrKey.RTE_CONFIG not in state.attributes


def test_rte_parameter_is_configurable() -> None:
    """The key looked up under ``parameters`` comes from the configuration."""
    title = element("t1")
    parent = _article(title, default_options={"title": {"parameters": {"editor": "full"}}})
    context = RenderContext(container_node=parent, current_slot_name="title")
    assert _rte(title, context) is None
    assert _rte(title, context, rte_parameter="editor") == "full"


def test_lookup_rte_config_tolerates_malformed_options() -> None:
    """Non-mapping levels yield None instead of raising."""
    assert lookup_rte_config(_article(None, default_options={}), "title", "rte") is None
    odd = _article(None, default_options={"title": {"parameters": "lite"}})
    assert lookup_rte_config(odd, "title", "rte") is None
    assert lookup_rte_config(_article(None), "title", "rte") == "lite"
