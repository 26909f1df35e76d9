import pytest

from ripkit.appstate import BAD_ID, AppState, RenderedFile


@pytest.fixture
def state():
    files = [
        RenderedFile("a.md", "<p>a</p>", ["one"]),
        RenderedFile("dir/b.md", "<p>b</p>", ["x", "y", "z"]),
        RenderedFile("c.md", "<p>c</p>", []),
    ]
    return AppState.from_files("/my/folder/of/markdown", files, "Secret Service")


def test_from_files_basic_fields(state):
    assert state.title == "Secret Service"
    assert state.data_source == "/my/folder/of/markdown"
    assert state.ordered_paths == ["a.md", "dir/b.md", "c.md"]
    assert [r.html for r in state.rendered_files] == ["<p>a</p>", "<p>b</p>", "<p>c</p>"]
    assert state.rendered_files[1].code_block_names == ["x", "y", "z"]


def test_from_files_facts(state):
    assert state.facts.max_code_blocks_in_a_file == 3
    assert state.facts.initial_file_index == BAD_ID
    assert state.facts.initial_code_block_index == BAD_ID
    assert state.facts.is_nav_visible is False
    assert state.facts.is_title_visible is True


def test_from_no_files():
    empty = AppState.from_files("src", [], "t")
    assert empty.facts.max_code_blocks_in_a_file == 0
    assert empty.initial_labels() == []


def test_initial_labels(state):
    labels = state.initial_labels()
    assert len(labels) == state.facts.max_code_blocks_in_a_file
    assert labels[0] == "label0"
    assert all(label == "label" + str(i) for i, label in enumerate(labels))


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/dir/b.md", 1),
        ("dir/b.md", 1),
        ("/c.md", 2),
        ("", 0),
        ("/", 0),
        ("/missing.md", 0),
    ],
)
def test_set_initial_file_index(state, path, expected):
    state.set_initial_file_index(path)
    assert state.facts.initial_file_index == expected


def test_set_initial_file_index_last_match_wins():
    files = [RenderedFile("a.md", ""), RenderedFile("a.md", "")]
    st = AppState.from_files("src", files, "t")
    st.set_initial_file_index("/a.md")
    assert st.facts.initial_file_index == 1