# containerkit

Small building blocks for integration tests that run against containers. The
package also has helpers that keep the configuration of a project that hosts
container examples and modules consistent.

## What is inside

| Module | Purpose |
| --- | --- |
| `containerkit.archive` | Pack a directory or a single file into a gzip-compressed tar archive. |
| `containerkit.streams` | The `Log` record, the `LogConsumer` protocol, and demultiplexing of the Docker stdout/stderr stream format. |
| `containerkit.dockerhost` | Find the Docker socket path, detect whether the code runs inside a container, find the default gateway address. Also holds the `LABEL_*` label names. |
| `containerkit.images` | List the base images of a Dockerfile, extract the registry from an image reference, check URLs. |
| `containerkit.session` | A process-wide session identifier, created once and reused, and the `VERSION` string. |
| `containerkit.modulegen` | `Example`, plus reading, writing and updating `mkdocs.yml` and `.github/dependabot.yml`. |

## Archives

```python
from containerkit.archive import is_dir, tar_dir, tar_file

if is_dir("testdata"):
    archive = tar_dir("testdata", 0o755)  # bytes; entry names start with "testdata/"

single = tar_file(b"FROM nginx\n", "path/to/Dockerfile", 0o644)  # one entry: "Dockerfile"
```

- `is_dir` raises `OSError` (for example `FileNotFoundError`) when the path cannot be read.
- `tar_dir` walks the directory in lexical order. It skips symbolic links and gives every entry
  the mode you pass. It prints a line for the directory it archives and one for each link it skips.
- Both functions return the archive as `bytes`.

## Images and registries

```python
from containerkit.images import (
    INDEX_DOCKER_IO,
    extract_images_from_dockerfile,
    extract_registry,
    is_url,
)

extract_images_from_dockerfile("Dockerfile.multistage", {"BASE_IMAGE": "scratch"})
# -> the image of every FROM line, with ${BASE_IMAGE} replaced

extract_registry("localhost:5000/testcontainers/ryuk:latest", INDEX_DOCKER_IO)  # "localhost:5000"
extract_registry("nginx:latest", INDEX_DOCKER_IO)  # INDEX_DOCKER_IO
extract_registry("", INDEX_DOCKER_IO)              # ""

is_url("docker.elastic.co")  # True
```

In build arguments, a value of `None` is left uninterpolated. A Dockerfile that
cannot be opened raises `OSError`.

## Docker host detection

```python
from containerkit.dockerhost import default_gateway_ip, extract_docker_host, in_a_container

extract_docker_host("unix:///this/is/a/sample.sock")  # "/this/is/a/sample.sock"
extract_docker_host("path-to-docker-sock")            # "/var/run/docker.sock"
extract_docker_host()                                 # "/var/run/docker.sock"
in_a_container()                                      # does /.dockerenv exist?
```

When the `TESTCONTAINERS_DOCKER_SOCKET_OVERRIDE` environment variable is set,
`extract_docker_host` returns its value. `default_gateway_ip()` runs
`ip route` through `sh` and `awk`. It raises `RuntimeError` when no address
can be found.

## Log streams

Any object with an `accept(log)` method satisfies the `LogConsumer` protocol.
A `Log` is a frozen dataclass with `log_type` (`STDOUT_LOG` or `STDERR_LOG`)
and `content` (bytes).

```python
import io
from containerkit.streams import ProcessOptions, demultiplex, multiplexed

stdout, stderr = demultiplex(io.BytesIO(raw_stream))

options = ProcessOptions(reader=io.BytesIO(raw_stream))
multiplexed()(options)   # options.reader now yields the stdout part only
```

`demultiplex` drops an incomplete trailing frame. It raises `ValueError` on a
daemon error frame or an unknown stream type.

## Session identifier

```python
from containerkit.session import session_id, session_string

assert session_string() == str(session_id())  # the same for the life of the process
```

## Project configuration tooling

`containerkit.modulegen.example.Example` describes a new example or module. Its
fields are `name`, `title_name`, `image`, `is_module` and `tc_version`. It has
these methods:

- `lower()`
- `title()`
- `container_name()`
- `entrypoint()`
- `parent_dir()` (`"modules"` or `"examples"`)
- `kind()` (`"module"` or `"example"`)
- `validate()`

`validate()` raises `ValueError` unless both the name and the title are letters
and digits that start with a letter.

`containerkit.modulegen.mkdocs` provides:

- `MkDocsConfig`
- `read_mkdocs_config(root_dir)` and `write_mkdocs_config(root_dir, config)`
- `mkdocs_config_file(root_dir)`
- `get_examples(root_dir)`, the example directories without `_template`
- `get_examples_docs(root_dir)`
- `get_root_dir()`, the parent of the working directory

`containerkit.modulegen.dependabot` provides:

- `DependabotConfig`, `Update` and `Schedule`
- `new_update(example)`, a monthly `gomod` entry
- `read_dependabot_config`, `write_dependabot_config`, `dependabot_config_file` and `get_dependabot_updates`

`containerkit.modulegen.generator` updates both files:

- `generate_mkdocs(root_dir, example)` adds `<parent>/<name>.md` to the Examples or Modules navigation. The `index.md` page stays first and the rest are sorted.
- `generate_dependabot_updates(root_dir, example)` adds the example's entry. The first entry stays first and the rest are sorted by directory.

## What this package does not do

- It does not create, start or stop containers.
- It does not talk to the Docker daemon and does not stream logs from it. `streams` only models log records and decodes streams you already have.
- The project tooling has no command-line program. It does not render files for a new example from templates. It only updates the documentation navigation and the dependabot configuration.

## Requirements

Python 3.10 or later. PyYAML is the only runtime dependency.