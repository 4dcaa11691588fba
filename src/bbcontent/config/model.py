# topmark:header:start
#
#   project      : BBContent
#   file         : model.py
#   file_relpath : src/bbcontent/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot used by the gate and the rules.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.

Merge order (lowest → highest precedence):
    1) Built-in defaults
    2) Project configs discovered upward **root → current**; within a directory
       `pyproject.toml` (``[tool.bbcontent]``) is merged first, then `bbcontent.toml`
    3) Extra config files passed explicitly (in the order provided)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from bbcontent.config.io import (
    get_string_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
)
from bbcontent.config.keys import Toml
from bbcontent.config.logging import get_logger
from bbcontent.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_CLASS_PARAM,
    DEFAULT_CONTAINER_TYPE,
    DEFAULT_CONTENT_NAMESPACE,
    DEFAULT_ELEMENT_NAMESPACE,
    DEFAULT_RTE_PARAMETER,
    DEFAULT_VIEW_ACTION,
    PYPROJECT_FILE_NAME,
    PYPROJECT_TOOL_SECTION,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from bbcontent.config.io import TomlTable
    from bbcontent.config.logging import BBContentLogger

logger: BBContentLogger = get_logger(__name__)


def _or_default(value: str | None, default: str) -> str:
    return value if value is not None else default


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for BBContent.

    Attributes:
        content_namespace (str): Namespace prefix shared by all content types
            (e.g. ``BackBee\\ClassContent\\``).
        element_namespace (str): Sub-namespace of element leaf types, relative to
            ``content_namespace`` (e.g. ``Element\\``).
        container_type (str): Short name of the base container type, relative to
            ``content_namespace`` (e.g. ``ContentSet``).
        view_action (str): Action name passed to the authorization service.
        class_param (str): Name of the render-context param merged into ``class``.
        rte_parameter (str): Key looked up under a slot's ``parameters`` for the
            rich-text-editor config.
        config_files (tuple[str, ...]): Config sources merged into this snapshot.
    """

    content_namespace: str
    element_namespace: str
    container_type: str
    view_action: str
    class_param: str
    rte_parameter: str
    config_files: tuple[str, ...] = ()

    @property
    def element_type_prefix(self) -> str:
        """Fully-qualified prefix of element leaf type names."""
        return self.content_namespace + self.element_namespace

    @property
    def container_type_name(self) -> str:
        """Fully-qualified name of the base container type."""
        return self.content_namespace + self.container_type

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            content_namespace=self.content_namespace,
            element_namespace=self.element_namespace,
            container_type=self.container_type,
            view_action=self.view_action,
            class_param=self.class_param,
            rte_parameter=self.rte_parameter,
            config_files=list(self.config_files),
        )

    @classmethod
    def from_defaults(cls) -> Config:
        """Return the frozen built-in defaults."""
        return MutableConfig.from_defaults().freeze()


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Every field is tri-state: ``None`` means "inherit", so that a later layer
    only overrides what it explicitly sets. `freeze` fills remaining gaps with
    the built-in defaults.
    """

    content_namespace: str | None = None
    element_namespace: str | None = None
    container_type: str | None = None
    view_action: str | None = None
    class_param: str | None = None
    rte_parameter: str | None = None
    config_files: list[str] = field(default_factory=lambda: [])

    def freeze(self) -> Config:
        """Freeze this mutable builder into an immutable Config.

        Unset fields take their defaults. ``content_namespace`` may be blank;
        every other lookup name must not be.

        Raises:
            ValueError: If ``element_namespace``, ``container_type``,
                ``view_action``, ``class_param`` or ``rte_parameter`` is blank.
        """
        required: dict[str, str] = {
            "element_namespace": _or_default(self.element_namespace, DEFAULT_ELEMENT_NAMESPACE),
            "container_type": _or_default(self.container_type, DEFAULT_CONTAINER_TYPE),
            "view_action": _or_default(self.view_action, DEFAULT_VIEW_ACTION),
            "class_param": _or_default(self.class_param, DEFAULT_CLASS_PARAM),
            "rte_parameter": _or_default(self.rte_parameter, DEFAULT_RTE_PARAMETER),
        }
        for name, value in required.items():
            if not value.strip():
                raise ValueError(f"Config invalid: `{name}` must not be blank.")

        return Config(
            content_namespace=_or_default(self.content_namespace, DEFAULT_CONTENT_NAMESPACE),
            element_namespace=required["element_namespace"],
            container_type=required["container_type"],
            view_action=required["view_action"],
            class_param=required["class_param"],
            rte_parameter=required["rte_parameter"],
            config_files=tuple(self.config_files),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a draft populated with the built-in defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(cls, data: TomlTable, config_file: Path | None = None) -> MutableConfig:
        """Create a draft config from a parsed TOML dict.

        Args:
            data (TomlTable): The parsed TOML data (top-level BBContent table).
            config_file (Path | None): Optional path to the source TOML file.

        Returns:
            MutableConfig: The resulting draft.
        """
        content_tbl: TomlTable = get_table_value(data, Toml.SECTION_CONTENT)
        logger.trace("TOML [content]: %s", content_tbl)

        security_tbl: TomlTable = get_table_value(data, Toml.SECTION_SECURITY)
        logger.trace("TOML [security]: %s", security_tbl)

        render_tbl: TomlTable = get_table_value(data, Toml.SECTION_RENDER)
        logger.trace("TOML [render]: %s", render_tbl)

        return cls(
            content_namespace=get_string_value_or_none(content_tbl, Toml.KEY_NAMESPACE),
            element_namespace=get_string_value_or_none(content_tbl, Toml.KEY_ELEMENT_NAMESPACE),
            container_type=get_string_value_or_none(content_tbl, Toml.KEY_CONTAINER_TYPE),
            view_action=get_string_value_or_none(security_tbl, Toml.KEY_VIEW_ACTION),
            class_param=get_string_value_or_none(render_tbl, Toml.KEY_CLASS_PARAM),
            rte_parameter=get_string_value_or_none(render_tbl, Toml.KEY_RTE_PARAMETER),
            config_files=[str(config_file)] if config_file else [],
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``bbcontent.toml`` and ``pyproject.toml`` files, extracting the
        ``[tool.bbcontent]`` section from the latter.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The draft if the file holds BBContent settings,
            otherwise ``None``.
        """
        data: TomlTable = load_toml_dict(path)
        if path.name == PYPROJECT_FILE_NAME:
            tool_tbl: TomlTable = get_table_value(data, Toml.SECTION_TOOL)
            if PYPROJECT_TOOL_SECTION not in tool_tbl:
                logger.debug("No [tool.%s] section in %s", PYPROJECT_TOOL_SECTION, path)
                return None
            data = get_table_value(tool_tbl, PYPROJECT_TOOL_SECTION)
        elif not data:
            return None
        logger.debug("Loaded config from %s", path)
        return cls.from_toml_dict(data, config_file=path)

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files found from the filesystem root down to ``start``.

        Within a directory, ``pyproject.toml`` is listed before ``bbcontent.toml`` so
        that the tool-specific file wins.

        Args:
            start (Path): Directory where discovery starts.

        Returns:
            list[Path]: Root-most first, nearest last.
        """
        found: list[Path] = []
        for directory in (start.resolve(), *start.resolve().parents):
            for name in (CONFIG_FILE_NAME, PYPROJECT_FILE_NAME):
                candidate: Path = directory / name
                if candidate.is_file():
                    found.append(candidate)
        found.reverse()
        return found

    @classmethod
    def load_merged(
        cls,
        *,
        anchor: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft `MutableConfig`.

        Args:
            anchor (Path | None): Discovery start directory (CWD if ``None``). If it is
                a file, its parent directory is used.
            extra_config_files (Iterable[Path] | None): Explicit additional config files
                to merge after discovery, in the given order.
            no_config (bool): If True, skip discovery.

        Returns:
            MutableConfig: A draft ready to be frozen.
        """
        draft: MutableConfig = cls.from_defaults()

        start: Path = anchor or Path.cwd()
        if start.is_file():
            start = start.parent

        if not no_config:
            for cfg_path in cls.discover_local_config_files(start):
                mc: MutableConfig | None = cls.from_toml_file(cfg_path)
                if mc is not None:
                    draft = draft.merge_with(mc)

        for extra in extra_config_files or ():
            mc = cls.from_toml_file(Path(extra))
            if mc is not None:
                draft = draft.merge_with(mc)

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values explicitly set in ``other`` override this draft.

        Args:
            other (MutableConfig): The config whose values override those of this draft.

        Returns:
            MutableConfig: A new mutable configuration representing the merged result.
        """
        return MutableConfig(
            content_namespace=other.content_namespace
            if other.content_namespace is not None
            else self.content_namespace,
            element_namespace=other.element_namespace
            if other.element_namespace is not None
            else self.element_namespace,
            container_type=other.container_type
            if other.container_type is not None
            else self.container_type,
            view_action=other.view_action if other.view_action is not None else self.view_action,
            class_param=other.class_param if other.class_param is not None else self.class_param,
            rte_parameter=other.rte_parameter
            if other.rte_parameter is not None
            else self.rte_parameter,
            config_files=self.config_files + other.config_files,
        )
