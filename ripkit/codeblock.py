"""A code block rendered so it looks like a terminal and can be run."""

from __future__ import annotations

from dataclasses import dataclass

CB_PROMPT = "&nbsp;►"
TMPL_NAME = "tmplCodeBlock"
KIND = "HighlightedCodeBlock"


@dataclass
class HighlightedCodeBlock:
    """A code block that is offered for copying and execution.

    It wraps a fenced code block; rendering emits the container markup
    around the wrapped block's own rendering.
    """

    file_index: int = 0
    block_index: int = 0
    title: str = ""

    @property
    def kind(self) -> str:
        return KIND

    def dump(self) -> dict[str, str]:
        """Return the node's attributes as strings, for debugging."""
        return {
            "FileIndex": str(self.file_index),
            "BlockIndex": str(self.block_index),
            "Title": self.title,
        }

    def render(self, entering: bool) -> str:
        """Return the opening markup when entering, the closing markup otherwise."""
        if entering:
            return (
                f"<div class='codeBlockContainer' id='codeBlockId{self.block_index}'>\n"
                "<div class='codeBlockControl'>\n"
                f"<span class='codeBlockTitle'> {self.title} </span>\n"
                "</div>\n"
                f"<div class='codeBlockPrompt'> {CB_PROMPT} </div>\n"
                "<div class='codeBlockArea'>"
            )
        return "</div></div>"