from __future__ import annotations


class ParseError(ValueError):
    pass


class InvalidFormat(ParseError):
    def __init__(self, reason: str, *, text: object = None) -> None:
        self.reason = reason
        self.text = text
        prefix = ""
        if text is not None:
            prefix = f"invalid version {text!r}: "
        super().__init__(prefix + reason)
