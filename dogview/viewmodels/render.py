"""Render instructions emitted by :class:`~dogview.viewmodels.gallery_vm.GalleryVM`.

The presentation layer receives batches of these frozen records and applies
them to its widgets. Nothing here touches a UI toolkit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple, Union


@dataclass(frozen=True)
class CardView:
    """One card in the grid."""

    key: str
    title: str
    image_url: Optional[str]
    alt: str
    meta: str = ""
    more_url: Optional[str] = None


@dataclass(frozen=True)
class ShowCards:
    cards: Tuple[CardView, ...]


@dataclass(frozen=True)
class ClearCards:
    pass


@dataclass(frozen=True)
class ShowSkeleton:
    count: int


@dataclass(frozen=True)
class ShowError:
    message: str


@dataclass(frozen=True)
class HideError:
    pass


@dataclass(frozen=True)
class SetStatus:
    text: str
    loading: bool = False


@dataclass(frozen=True)
class SetControlsEnabled:
    enabled: bool


@dataclass(frozen=True)
class SyncControls:
    """Push state values into the query field, limit selector, and tabs."""

    query: str
    limit: int
    view: str


RenderInstruction = Union[
    ShowCards,
    ClearCards,
    ShowSkeleton,
    ShowError,
    HideError,
    SetStatus,
    SetControlsEnabled,
    SyncControls,
]

RenderSink = Callable[[Sequence[RenderInstruction]], None]


__all__ = [
    "CardView",
    "ClearCards",
    "HideError",
    "RenderInstruction",
    "RenderSink",
    "SetControlsEnabled",
    "SetStatus",
    "ShowCards",
    "ShowError",
    "ShowSkeleton",
    "SyncControls",
]
