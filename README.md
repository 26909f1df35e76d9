# ripkit

`ripkit` has two halves:

* **Release tooling** for a Go module kept in a git repository. It checks
  that the workspace is clean and that `HEAD` carries the latest tag, builds
  and pushes a Docker image, cross-compiles archives for several platforms,
  and drafts a GitHub release with those archives attached.
* **Web-app building blocks** for presenting markdown code blocks: route
  names, session defaults, query-parameter parsing, template helpers,
  application state, left-navigation HTML, highlighted code-block markup and
  an animated Lissajous GIF.

## Installing

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Cutting a release

The release command drives `git`, `go`, `docker`, `zip`, `tar` and `gh`, so
all of them must be on `PATH`. The `GH_TOKEN` environment variable must be
set, and you must be able to `docker login`.

Apply and push the tag you want to release first (it must start with `v`
and a digit), then run the command from the top of the repository, passing
the absolute path of the module:

```
ripkit-release "$(realpath .)"
```

The command exits with status 1 if `GH_TOKEN` is missing, if it gets no
argument, more than one, or a relative path, or if any step fails. It
refuses to go on if the workspace has uncommitted changes, or if the newest
tag is not the tag on `HEAD`; in that case it logs the git commands for
defining and pushing a fresh tag.

The steps, in order:

1. Log in to Docker, write a `Dockerfile` into a new temporary directory,
   build the image `ripkit/<program>:<version>`, tag it `latest` as well,
   and push both tags. `<program>` is the last component of the module path.
2. Build the module for linux/amd64, windows/amd64, darwin/amd64 and
   darwin/arm64 with `CGO_ENABLED=0` and `-ldflags` that strip symbols and
   set `version`, `gitCommit` and `buildDate`. Each binary is packed into
   `<program>_<version>_<os>_<arch>.tar.gz` (`.zip` for Windows) in the
   temporary directory.
3. Create a draft GitHub release at the tag with generated notes, attaching
   the archives.

The same steps are available from Python in `ripkit.release`: `find_tag`
(raises `TagMismatchError`), `build_and_push_docker_image`,
`build_release_assets` and `release`. The tools are wrapped by `GitRunner`,
`GithubRunner`, `DockerRunner` and `GoBuilder` (with `LdVars`, `TargetOs`
and `TargetArch`), all built on `ripkit.runner.CommandRunner`. A runner made
with `Behavior.FAKE_IT` only logs commands whose `SafetyLevel` is
`UNDO_IS_HARD` instead of running them.

```python
from ripkit.gobuilder import LdVars

LdVars("example/provenance", {"version": "v1.0.0"}).make_ld_flags()
# '-s -w -X example/provenance.version=v1.0.0'
```

### Timed calls

```python
import time
from ripkit.timedcall import CallTimeoutError, timed_call

timed_call("quick", 0.5, lambda: 42)          # returns 42

try:
    timed_call("slow", 0.01, lambda: time.sleep(0.1))
except CallTimeoutError as err:
    print(err)   # hit 10ms timeout running 'slow'
```

An exception raised by the function within the time limit is raised again
unchanged. `format_duration` gives the duration text used in the message.

## Web-app pieces

* `ripkit.routes`: the `Route` enumeration, the query/cookie key constants
  and `dynamic(route)`, the URL path of a dynamic endpoint (e.g. `/_/js`).
* `ripkit.session`: `make_session_id` (six hex digits), `assure_defaults`,
  which fills missing or mistyped entries of a session value mapping in
  place, and `Bucket.from_values` for a typed view of it.
* `ripkit.queryparams`: `get_int_param` and `get_bool_param`, which return
  the default when a parameter is missing or unparsable, `parse_go_bool`,
  and `check_in_range`, which accepts an argument that is non-negative or
  less than `n` and otherwise raises `RangeError`.
* `ripkit.templates`: `as_tmpl`, `num_chars_to_em`, `id_and_label`,
  `make_func_map` and `default_params`, which returns a `JsCssParams`.
* `ripkit.appstate`: `AppState.from_files` built from `RenderedFile`
  values, `initial_labels` and `set_initial_file_index`.
* `ripkit.navleft`: build a tree from `NavFolder`, `NavFile` and
  `NavTopFolder`, then turn it into navigation HTML with `NavRenderer`.
* `ripkit.codeblock`: `HighlightedCodeBlock`, the markup around a runnable
  code block.
* `ripkit.lissajous`: writes an animated GIF of a Lissajous figure.
* `ripkit.sampledata`: random markdown documents (`md_bytes`), labels,
  lorem-ipsum and filler HTML, and a fixed sample folder tree
  (`make_folder_tree_of_markdown`); each random function takes an optional
  `random.Random`.

```python
from ripkit.navleft import NavFile, NavFolder, NavRenderer

tree = NavFolder("docs").add_file(NavFile("intro.md"))
renderer = NavRenderer()
html = renderer.render(tree)
renderer.num_files, renderer.num_folders   # (1, 1)
renderer.max_file_name_length              # 7: depth 1 * 2 + len("intro")
```

```python
import io
from ripkit.lissajous import lissajous

buf = io.BytesIO()
lissajous(buf, 100, 3, 10, 1.5)
gif_bytes = buf.getvalue()   # starts with b"GIF"
```

## What ripkit does not do

The web-app half is a set of pieces only. There is no HTTP server, no
command that serves a folder of markdown, no markdown parsing or rendering
to HTML, no extraction or execution of code blocks, and no page templates,
JavaScript or CSS. `AppState.from_files` expects files that have already
been rendered elsewhere.