"""Numbered-option menus for single and multiple selection."""

import sys
from dataclasses import dataclass, field
from getpass import getpass
from typing import Callable, List, Sequence, TextIO


@dataclass
class PromptConfig:
    """I/O configuration for prompts and menus."""

    input_fn: Callable[[str], str] = field(default_factory=lambda: input)
    password_fn: Callable[[str], str] = field(default_factory=lambda: getpass)
    output: TextIO = field(default_factory=lambda: sys.stderr)


def read_answer(prompt_text, config, read_fn=None):
    """Read one line of input, exiting with status 1 when input is closed."""
    read_fn = read_fn or config.input_fn
    try:
        return read_fn(prompt_text)
    except EOFError:
        print("", file=config.output)
        print("Input closed. Exiting.", file=config.output)
        sys.exit(1)


def _display_options(prompt, options, marked, output):
    print("", file=output)
    print(prompt, file=output)
    for i, option in enumerate(options):
        label = f"  {i + 1}) {option}"
        if i + 1 in marked:
            label += " [default]" if len(marked) == 1 else " [x]"
        print(label, file=output)
    print("", file=output)


def _parse_choice(raw_input, option_count, default):
    if raw_input == "" and default:
        return default
    if raw_input.isdigit() and 1 <= int(raw_input) <= option_count:
        return int(raw_input)
    return None


def _parse_choices(raw_input, option_count, defaults):
    tokens = raw_input.replace(",", " ").split()
    if not tokens:
        return sorted(defaults)
    if not all(t.isdigit() and 1 <= int(t) <= option_count for t in tokens):
        return None
    return sorted({int(t) for t in tokens})


def get_user_choice(prompt, default, options, *, config=None):
    """Display numbered options and return the user's selection.

    Returns:
        1-based index of the selected option.
    """
    if config is None:
        config = PromptConfig()

    _display_options(prompt, options, {default}, config.output)
    prompt_text = f"Enter your choice (1-{len(options)}) [default: {default}]: "

    while True:
        choice = read_answer(prompt_text, config).strip()
        parsed = _parse_choice(choice, len(options), default)
        if parsed is not None:
            return parsed
        print(
            f"Invalid choice. Please enter a number between 1 and {len(options)}.",
            file=config.output,
        )


def get_user_choices(
    prompt: str, defaults: Sequence[int], options: Sequence[str], *, config=None,
) -> List[int]:
    """Display numbered options and return every option the user selected.

    Input is a comma or space separated list of numbers. Empty input keeps
    the pre-selected ``defaults``; ``none`` selects nothing.

    Returns:
        Sorted 1-based indexes of the selected options.
    """
    if config is None:
        config = PromptConfig()

    _display_options(prompt, options, set(defaults), config.output)
    prompt_text = f"Enter numbers separated by commas (1-{len(options)}), or 'none': "

    while True:
        raw = read_answer(prompt_text, config).strip()
        if raw.lower() == "none":
            return []
        parsed = _parse_choices(raw, len(options), defaults)
        if parsed is not None:
            return parsed
        print(
            f"Invalid selection. Please enter numbers between 1 and {len(options)}.",
            file=config.output,
        )
