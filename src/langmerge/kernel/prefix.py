"""Namespace prefix routing for logical paths.

Every key read from a translation file is prefixed with a namespace derived
from the file's logical path. Routing is a pure function over the path's
segments returning one rule variant per routing branch:

    core/features/calendar/lang.json -> CoreFeatureRoute  -> "core.calendar."
    core/lang.json                   -> CoreRoute         -> "core."
    addons/mod/forum/lang.json       -> AddonRoute        -> "addon.mod_forum."
    assets/countries/en.json         -> AssetRoute        -> "assets.en."
    custom/plugin/lang.json          -> ComponentRoute    -> "custom.plugin."
"""

from __future__ import annotations

from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from langmerge.kernel.paths import PathResolutionError, to_forward_slashes

PREFIX_DELIMITER = "."


def _join(*parts: str) -> str:
    """Join non-empty parts with the delimiter and add the trailing delimiter."""
    return PREFIX_DELIMITER.join(part for part in parts if part) + PREFIX_DELIMITER


class CoreRoute(BaseModel):
    kind: Literal["core"] = "core"

    model_config = ConfigDict(extra="forbid", frozen=True)

    def render(self) -> str:
        return _join("core")


class CoreFeatureRoute(BaseModel):
    kind: Literal["core_feature"] = "core_feature"
    feature: str

    model_config = ConfigDict(extra="forbid", frozen=True)

    def render(self) -> str:
        return _join("core", self.feature)


class AddonRoute(BaseModel):
    """Addon files: every folder below addons/ becomes part of the name."""
    kind: Literal["addon"] = "addon"
    folders: List[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid", frozen=True)

    def render(self) -> str:
        return _join("addon", "_".join(self.folders))


class AssetRoute(BaseModel):
    """Asset files are named by their filename, not their folder."""
    kind: Literal["assets"] = "assets"
    name: str

    model_config = ConfigDict(extra="forbid", frozen=True)

    def render(self) -> str:
        return _join("assets", self.name)


class ComponentRoute(BaseModel):
    """Generic two-level fallback for any other top-level folder."""
    kind: Literal["component"] = "component"
    group: str
    component: str = ""

    model_config = ConfigDict(extra="forbid", frozen=True)

    def render(self) -> str:
        return _join(self.group, self.component)


PrefixRoute = Annotated[
    Union[CoreRoute, CoreFeatureRoute, AddonRoute, AssetRoute, ComponentRoute],
    Field(discriminator="kind"),
]


def split_logical_path(logical_path: str) -> List[str]:
    """Split a logical path into segments, dropping empty ones."""
    return [segment for segment in to_forward_slashes(logical_path).split("/") if segment]


def strip_extension(filename: str) -> str:
    """Remove the final extension (``en.json`` -> ``en``, ``a.b.json`` -> ``a.b``)."""
    stem, dot, _ = filename.rpartition(".")
    return stem if dot and stem else filename


def route_segments(segments: List[str]) -> PrefixRoute:
    """Pick the routing rule for a logical path's segment list.

    The last segment is the filename. It only contributes to the prefix for
    assets.

    Raises:
        PathResolutionError: If the segment list is empty
    """
    if not segments:
        raise PathResolutionError("Cannot route an empty logical path")

    folders, filename = segments[:-1], segments[-1]
    if not folders:
        # A file directly under the source root acts as its own group.
        return ComponentRoute(group=strip_extension(filename))

    top = folders[0]
    if top == "core":
        if len(folders) > 2 and folders[1] == "features":
            return CoreFeatureRoute(feature=folders[2])
        return CoreRoute()
    if top == "addons":
        return AddonRoute(folders=folders[1:])
    if top == "assets":
        return AssetRoute(name=strip_extension(filename))
    return ComponentRoute(group=top, component=folders[1] if len(folders) > 1 else "")


def route_prefix(logical_path: str) -> PrefixRoute:
    """Route a logical path such as ``core/features/x/lang.json``."""
    return route_segments(split_logical_path(logical_path))


def compute_prefix(logical_path: str) -> str:
    """Return the namespace prefix (always ending in ``.``) for a logical path."""
    return route_prefix(logical_path).render()
