# topmark:header:start
#
#   project      : BBContent
#   file         : resolve.py
#   file_relpath : src/bbcontent/cli/commands/resolve.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BBContent `resolve` command.

Loads a scenario file (see [`bbcontent.scenario`][]), resolves the target node
and prints the resulting attribute string, or a JSON document describing the
resolution with ``--format json``.

Configuration is discovered upward from the scenario's directory, then any
``--config`` files are merged in order.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import click

from bbcontent.attributes.serializer import serialize_attributes
from bbcontent.cli.errors import (
    BBContentConfigError,
    BBContentResolutionError,
    BBContentScenarioError,
)
from bbcontent.cli.options import OutputFormat, common_config_options
from bbcontent.config import Config, MutableConfig
from bbcontent.config.logging import get_logger
from bbcontent.errors import BBContentError, ScenarioError
from bbcontent.resolver.engine import AttributeResolver
from bbcontent.scenario import load_scenario

if TYPE_CHECKING:
    from bbcontent.cli.console import ClickConsole
    from bbcontent.config.logging import BBContentLogger
    from bbcontent.content.model import ContentNode
    from bbcontent.resolver.state import ResolutionState
    from bbcontent.scenario import Scenario

logger: BBContentLogger = get_logger(__name__)


def load_cli_config(
    anchor: Path,
    *,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> Config:
    """Discover, merge and freeze configuration for a command run.

    Raises:
        BBContentConfigError: If the merged configuration is invalid.
    """
    draft: MutableConfig = MutableConfig.load_merged(
        anchor=anchor,
        extra_config_files=[Path(p) for p in config_paths],
        no_config=no_config,
    )
    try:
        return draft.freeze()
    except ValueError as e:
        raise BBContentConfigError(str(e)) from e


@click.command(
    name="resolve",
    help="Resolve the HTML attributes of a content node described by a scenario file.",
)
@click.argument(
    "scenario_path",
    metavar="SCENARIO",
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--node",
    "node_key",
    default=None,
    help="Resolve this node key instead of the scenario's [target].",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat]),
    default=OutputFormat.TEXT.value,
    help="Output format.",
)
@common_config_options
@click.pass_context
def resolve_command(
    ctx: click.Context,
    scenario_path: Path,
    node_key: str | None,
    output_format: str,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Resolve a scenario and print its attribute string."""
    console: ClickConsole = ctx.obj["console"]
    vlevel: int = ctx.obj.get("verbosity_level", 0)

    try:
        scenario: Scenario = load_scenario(scenario_path)
    except ScenarioError as e:
        raise BBContentScenarioError(str(e)) from e

    target: ContentNode | None = scenario.target
    if node_key is not None:
        if node_key not in scenario.nodes:
            raise BBContentScenarioError(f"Unknown node key {node_key!r} in {scenario_path}")
        target = scenario.nodes[node_key]

    config: Config = load_cli_config(
        scenario_path.parent, config_paths=config_paths, no_config=no_config
    )
    resolver: AttributeResolver = AttributeResolver.from_config(
        config, authorization=scenario.authorization
    )

    try:
        state: ResolutionState = resolver.compute(
            target, context=scenario.context, options=scenario.options
        )
    except BBContentError as e:
        raise BBContentResolutionError(str(e)) from e

    html: str = serialize_attributes(state.attributes)
    logger.debug("Resolved %s: %s", state.node.uid, html)

    if OutputFormat(output_format) is OutputFormat.JSON:
        payload: dict[str, object] = {
            "node": state.node.uid,
            "granted": state.granted,
            "rules": state.applied_rules,
            "attributes": state.attributes.as_dict(),
            "html": html,
        }
        console.print(json.dumps(payload, indent=2, default=str))
        return

    if vlevel > 0:
        mode: str = "granted" if state.granted else "full rule set"
        console.print(console.styled(f"{state.node.type_name} ({state.node.uid}): {mode}", bold=True))
        if vlevel > 1 and state.applied_rules:
            console.print(f"  rules: {', '.join(state.applied_rules)}")
    console.print(html)
