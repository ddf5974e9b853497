"""Link descriptor returned by link generators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class LinkDescriptor:
    """One outbound link attached to a hit.

    ``order`` is a left-right placement hint among the links of a hit,
    ``css_class`` a whitespace separated list of classes and ``icon`` the
    FontAwesome class of the icon shown next to the title.
    """

    title: str
    url: str
    order: Optional[int] = None
    css_class: Optional[str] = None
    icon: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"title": self.title, "url": self.url}
        if self.order is not None:
            payload["order"] = self.order
        if self.css_class is not None:
            payload["class"] = self.css_class
        if self.icon is not None:
            payload["icon"] = self.icon
        return payload
