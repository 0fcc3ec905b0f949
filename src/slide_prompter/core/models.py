from dataclasses import dataclass, asdict, replace
from typing import Any, Mapping

@dataclass(frozen=True)
class SlideRecord:
    """Script text and title attached to one slide."""
    script: str = ""
    title: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.script.strip() and not self.title.strip()

    def with_script(self, script: str) -> "SlideRecord":
        return replace(self, script=script)

    def with_title(self, title: str) -> "SlideRecord":
        return replace(self, title=title)

    def to_dict(self):
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]):
        # Records written by hand may omit either field or carry null
        return cls(
            script=str(data.get("script") or ""),
            title=str(data.get("title") or ""),
        )

@dataclass
class PrompterSettings:
    """Reading settings applied to the script view."""
    font_size: int = 13        # Pixels
    line_height: float = 1.5   # Unitless multiplier

    def to_dict(self):
        # Stored keys keep the camelCase layout of existing settings files
        return {"fontSize": self.font_size, "lineHeight": self.line_height}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], defaults: "PrompterSettings" = None):
        base = defaults or cls()
        return cls(
            font_size=int(data.get("fontSize", base.font_size)),
            line_height=float(data.get("lineHeight", base.line_height)),
        )
