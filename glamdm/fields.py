# fields.py
# Single-line text entry used for the banner text and the two hex color inputs.

from dataclasses import dataclass, replace

from rich.text import Text

CHAR_LIMIT = 256


@dataclass(frozen=True)
class TextField:
    """Immutable edit buffer; every edit returns a new field."""

    value: str = ""
    cursor: int = 0
    placeholder: str = ""
    focused: bool = False
    char_limit: int = CHAR_LIMIT

    @classmethod
    def new(cls, placeholder: str, value: str, focused: bool = False) -> "TextField":
        return cls(value=value, cursor=len(value), placeholder=placeholder, focused=focused)

    def focus(self) -> "TextField": return replace(self, focused=True)
    def blur(self) -> "TextField": return replace(self, focused=False)

    def set_value(self, value: str) -> "TextField":
        value = value[: self.char_limit]
        return replace(self, value=value, cursor=len(value))

    def handle_key(self, key: str) -> "TextField":
        if not self.focused:
            return self
        v, c = self.value, self.cursor
        if key == "backspace":
            if c == 0:
                return self
            return replace(self, value=v[: c - 1] + v[c:], cursor=c - 1)
        if key == "delete":
            return replace(self, value=v[:c] + v[c + 1:])
        if key in ("home", "ctrl+a"):
            return replace(self, cursor=0)
        if key in ("end", "ctrl+e"):
            return replace(self, cursor=len(v))
        if key == "ctrl+u":
            return replace(self, value=v[c:], cursor=0)
        if key == "ctrl+k":
            return replace(self, value=v[:c])
        if key == "ctrl+w":
            start = len(v[:c].rstrip())
            while start and not v[start - 1].isspace():
                start -= 1
            return replace(self, value=v[:start] + v[c:], cursor=start)
        if len(key) == 1 and key.isprintable():
            if len(v) >= self.char_limit:
                return self
            return replace(self, value=v[:c] + key + v[c:], cursor=c + 1)
        return self

    def render(self) -> Text:
        if not self.value and not self.focused:
            return Text(self.placeholder, style="dim")
        out = Text(self.value[: self.cursor])
        if self.focused:
            under = self.value[self.cursor: self.cursor + 1] or " "
            out.append(under, style="reverse")
            out.append(self.value[self.cursor + 1:])
        else:
            out.append(self.value[self.cursor:])
        return out
