from ripkit.codeblock import CB_PROMPT, HighlightedCodeBlock


def test_render_entering():
    block = HighlightedCodeBlock(file_index=2, block_index=700, title="Your Mom")
    assert block.render(True) == (
        "<div class='codeBlockContainer' id='codeBlockId700'>\n"
        "<div class='codeBlockControl'>\n"
        "<span class='codeBlockTitle'> Your Mom </span>\n"
        "</div>\n"
        "<div class='codeBlockPrompt'> &nbsp;► </div>\n"
        "<div class='codeBlockArea'>"
    )


def test_render_leaving():
    block = HighlightedCodeBlock(file_index=0, block_index=1, title="t")
    assert block.render(False) == "</div></div>"


def test_render_contains_prompt():
    block = HighlightedCodeBlock(block_index=3, title="x")
    assert CB_PROMPT in block.render(True)
    assert CB_PROMPT not in block.render(False)


def test_dump():
    block = HighlightedCodeBlock(file_index=4, block_index=9, title="Your Mom")
    assert block.dump() == {
        "FileIndex": "4",
        "BlockIndex": "9",
        "Title": "Your Mom",
    }


def test_kind():
    assert HighlightedCodeBlock().kind == "HighlightedCodeBlock"