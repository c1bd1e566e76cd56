# aicoder

`aicoder` is a command-line tool for code work with a chat-completion service.
The service can be OpenAI-compatible or Azure OpenAI. The tool does two jobs:

- It scaffolds new code from a prompt.
- It scores an existing source file and proposes a refactored version.

Every request asks the service for a JSON object reply, with a temperature of 0.1.

## Installation

```
pip install .
```

To install the test dependencies (`pytest`, `responses`) as well:

```
pip install ".[test]"
```

## Configuration

`aicoder` reads its settings from `aicoder.json`. It looks in the current
working directory first. If the file is not there, it looks in the directory of
the program that was started. If neither place has the file, or the file is not
valid JSON, the command prints an error and exits with status 1.

```json
{
  "endpoint": "https://api.example.com/v1/chat/completions",
  "key": "placeholder",
  "model": "gpt-4o",
  "type": "openai",
  "code_system_prompt": "Answer with JSON: {\"files\": [{\"filepath\": ..., \"code\": ...}]}",
  "refactor_system_prompt": "Answer with JSON holding readability_score, readability_reason, cyclomatic_score, cyclomatic_reason and improved_code."
}
```

- `type` defaults to `openai`.
  - With `azure`, the key is sent in an `api-key` header.
  - With any other value, the key is sent as `Authorization: Bearer ...`.
- `endpoint`, `key`, `model`, `code_system_prompt` and `refactor_system_prompt`
  are required, and every field must be a string. If a required field is
  missing or empty, the error names that field.

## Usage

Run `aicoder` on its own to show the banner and a usage hint:

```
aicoder
```

### Generate code

```
aicoder code -p "Create a Python FastAPI application to manage customer."
aicoder co --prompt "A CLI that counts words in a file"
```

The service must reply with `{"files": [{"filepath": ..., "code": ...}]}`.
`aicoder` prints each generated file and then asks `Do you want to write files?`.
Only `y` or `Y` counts as yes.

If you answer yes, it writes each file and creates any missing parent
directories. It stops at the first file that cannot be written.

### Refactor a file

```
aicoder refactor -f app.py -o app_sanitized.py
aicoder re -f app.py
```

The file's contents go to the service with `refactor_system_prompt`. The reply
holds two scores, each printed with its reason:

- the readability score, shown in red when it is below 5;
- the cyclomatic complexity score, shown in red when it is above 5.

If the reply contains improved code, `aicoder` asks whether to show it. After
showing it, it asks whether to write it to a file.

If you leave out `-o`, the output name keeps two parts of the input name: the
text before the first dot, and the text after that dot. `_sanitized` is inserted
between them, so `app.py` becomes `app_sanitized.py`. If either part is empty,
for example `./app.py` or a name without a dot, nothing is written.

If you leave out `-f`, the command prints an example invocation and exits.

Run `aicoder --help` to list every command and option.

## Using it from Python

| Module | What it provides |
| --- | --- |
| `aicoder.config` | `get_config()` loads and caches the settings. `load_config(path)` reads one file. `reset_config()` clears the cache. `ConfigError` is raised on any configuration problem. |
| `aicoder.openai_client` | `chat_completion(messages, model, temperature, config)` returns the content of the first reply choice, and raises `ChatCompletionError` on failure. `dispose_client()` closes the shared HTTP session. |
| `aicoder.models` | `Message`, `ChatRequest`, `CodeFile`, `CodeFiles` and `SanitizerResponse`, plus the `parse_*` functions. They raise `ResponseParseError` on malformed replies. |
| `aicoder.scaffolder` | `scaffold(prompt)` returns the paths it wrote. `generate_code_files`, `display_code_files` and `write_code_files` are the individual steps. |
| `aicoder.refactor` | `refactor(file, output)` returns the path it wrote, or `None`. It also provides `report_results` and `sanitized_path`. |
| `aicoder.cli` | `main(argv=None)` runs the command line and returns an exit code. |

## Limitations

- `aicoder` does not stream replies.
- It does not retry failed requests.
- It does not check or run the code it receives. Generated files are written
  exactly as the service returned them, and existing files are overwritten.