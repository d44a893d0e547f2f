"""Console prompts: titles, free-text input, confirmation, numbered and fuzzy selection."""
import sys
from typing import List, Optional, Sequence

from averse.logic.search.fuzzy import fuzzy_filter
from averse.utilities.constants import APP_NAME

MAX_MATCHES = 10


def title(msg: str):
    """Clear the terminal (when attached to one) and print the banner followed by msg."""
    if sys.stdout.isatty():
        print("\033[2J\033[H", end="")
    print(f"∮ {APP_NAME} ╣ A Meal Planner ╠\n{msg}")


def input_msg(msg: str, allow_empty: bool = True) -> str:
    while True:
        value = input(f"{msg}: ").strip()
        if value or allow_empty:
            return value


def confirm(msg: str, default: bool = False) -> bool:
    hint = "[Y/n]" if default else "[y/N]"
    answer = input(f"{msg} {hint}: ").strip().lower()
    if not answer:
        return default
    return answer in ("y", "yes")


def _pick(count: int, prompt: str, allow_cancel: bool) -> Optional[int]:
    while True:
        answer = input(f"{prompt} [1-{count}]: ").strip()
        if not answer and allow_cancel:
            return None
        if answer.isdigit() and 1 <= int(answer) <= count:
            return int(answer) - 1
        print(f"Please enter a number between 1 and {count}.")


def select(items: Sequence[str], prompt: str = "Select", allow_cancel: bool = True) -> Optional[int]:
    """Numbered menu. Returns the chosen index, or None when cancelled with a blank answer."""
    for i, item in enumerate(items, start=1):
        print(f"  {i}) {item}")
    suffix = " (ENTER to go back)" if allow_cancel else ""
    return _pick(len(items), prompt + suffix, allow_cancel)


def fuzzy_select(items: Sequence[str], prompt: str = "Type to search") -> Optional[int]:
    """Search items by fuzzy query, then pick one of the best matches.

    A blank query cancels (None). At the pick prompt a blank answer takes the
    top match and '/' starts a new search.
    """
    while True:
        query = input(f"{prompt} (ENTER to cancel): ").strip()
        if not query:
            return None
        matches: List = fuzzy_filter(query, items)[:MAX_MATCHES]
        if not matches:
            print(f"No matches for '{query}'.")
            continue
        for i, (_, item) in enumerate(matches, start=1):
            print(f"  {i}) {item}")
        answer = input(f"Pick [1-{len(matches)}] (ENTER for 1, / to search again): ").strip()
        if not answer:
            return matches[0][0]
        if answer.isdigit() and 1 <= int(answer) <= len(matches):
            return matches[int(answer) - 1][0]
