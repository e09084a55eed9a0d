# zenta

Mindfulness for terminal users. You can take a guided breathing break or end the day with a short, gentle reflection, all from your shell. The package uses only the standard library.

## Installation

```
pip install .
```

## Usage

```
zenta now [options]   Take a mindful breathing moment
zenta reflect         End-of-day reflection on thought patterns
zenta help            Show the help message
zenta version         Show the version (also: --version, -v)
```

If you run `zenta` with no command, it shows the help message. If you give an unknown command, zenta prints a hint to stderr and exits with status 1.

### Options for `now`

| Option             | Effect                                                             |
|--------------------|--------------------------------------------------------------------|
| `--quick`, `-q`    | Quick 1-cycle session                                              |
| `--extended`, `-e` | Extended 5-cycle session                                           |
| `--silent`, `-s`   | Breathing only. Skips the closing quote.                           |
| `--simple`         | Simple line animation, for terminal compatibility                  |
| `--complex`        | Forces the circle animation (the default except on Apple Terminal) |

zenta ignores options it does not recognise.

A session runs three cycles by default. Each cycle has four phases, each lasting four seconds: inhale, hold, exhale and rest. Between cycles there is a two-second pause.

At the end of the session, zenta types out one of 25 built-in quotes from Zen, Stoic and mindfulness writing, one character at a time. With `--silent`, it shows a short closing line instead.

The circle animation moves the cursor with ANSI escape sequences. On macOS, when `TERM_PROGRAM` is `Apple_Terminal`, zenta uses the simple line animation instead.

The cursor is hidden while the session runs. It is shown again when the session ends. It is also shown again if the session is stopped by SIGINT, SIGTERM or SIGHUP. On POSIX systems the program then exits with status 128 plus the signal number.

`zenta reflect` prints a short evening reflection at a slow pace:

1. A title.
2. Two settling instructions.
3. Three reflection questions, each followed by an eight-second pause.
4. Two closing lines.

`zenta version` prints `zenta version dev`.

### Examples

```
zenta now              # standard 3-cycle session
zenta now --quick      # a 1-cycle break
zenta now --extended   # a 5-cycle session
zenta now --silent     # no quote at the end
zenta reflect          # evening reflection
```

### Handy aliases

```
alias breath='zenta now --quick'
alias breathe='zenta now'
alias reflect='zenta reflect'
```

## Using it as a library

- `zenta.breathing.Session` is a dataclass that holds the cycle count and phase durations.
  - `parse_args(args)` applies the `now` options.
  - `start()` draws the session.
  - `hide_cursor()` is a context manager.
  - `stream` and `sleep` can be replaced, for example to render into a `StringIO` without waiting.
- `zenta.quotes.QuoteService(quotes=None)` serves the built-in quotes, or the ones you pass in.
  - It has `get_random_quote()`, `get_all_quotes()` and `quote_count()`.
  - When the collection is empty, `get_random_quote()` returns `"🧘 Take a breath. This moment is all there is."`.
- `zenta.display` formats quotes:
  - `parse_quote_emoji(quote)` splits off a leading emoji, or falls back to 💭.
  - `wrap_quote_text(text)` wraps text at 50 characters.
  - `display_beautifully(quote, stream=None, sleep=time.sleep)` types a quote out.
- `zenta.reflection.get_default_prompts()` returns the `PromptSet` that `zenta reflect` uses.
- `zenta.version.get()` returns an `Info` record. `string_with_program_name(name)` describes the build.

## What it does not do

- Sessions cannot be stopped with a key press; only an interrupt signal such as Ctrl-C ends them early.
- Phase durations cannot be set from the command line.
- Nothing is stored: no history, no settings file, no journal of reflections.

## Running the tests

```
pip install .[test]
pytest
```