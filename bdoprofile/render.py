"""Rich renderables for profiles and the interactive screen."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from rich.console import Group, RenderableType
from rich.padding import Padding
from rich.spinner import Spinner
from rich.text import Text

from . import markup
from .models import Profile

if TYPE_CHECKING:
    from .controller import SessionController

APP_TITLE = "BDO Family Profile Viewer"
RULE_WIDTH = 40


@dataclass(frozen=True)
class Theme:
    title: str = "bold color(63)"
    help: str = "color(241)"
    error: str = "bold color(9)"
    key: str = "color(252)"
    value: str = "color(86)"
    character: str = "color(213)"
    main_character: str = "bold color(86)"
    spinner: str = "color(205)"


def render_profile(profile: Profile, theme: Theme) -> Text:
    """Format ``profile`` as a block of styled lines, keeping page order."""
    info = profile.family_info
    text = Text()

    for label, value in (("Family", info.name), ("Guild", info.guild), ("Created", info.creation_date)):
        _append_pair(text, label, value, theme)
        text.append("\n")

    _append_pair(text, "PAPD", info.papd, theme)
    text.append(" | ")
    _append_pair(text, "Energy", info.energy, theme)
    text.append(" | ")
    _append_pair(text, "CP", info.contribution, theme)
    text.append("\n")

    _append_section(text, "Characters", theme)
    for character in profile.characters:
        line = f"• {character.name:<18} {character.character_class:<12} {character.level}"
        style = theme.main_character if character.is_main else theme.character
        text.append(line.rstrip(), style=style)
        text.append("\n")

    _append_section(text, "Life Skills", theme)
    for skill in profile.life_skills:
        level_value = f"{markup.LEVEL_MARKER}{skill.level_value}" if skill.level_value else ""
        text.append("• ")
        text.append(f"{skill.name:<34}", style=theme.key)
        text.append(" ")
        text.append(f"{skill.level_name:<28}", style=theme.value)
        text.append(" ")
        text.append(f"{level_value:<8}", style=theme.value)
        if skill.mastery:
            text.append(" ")
            text.append(skill.mastery, style=theme.key)
        text.rstrip()
        text.append("\n")

    return text


def render_screen(
    controller: "SessionController",
    theme: Theme,
    spinner: Optional[Spinner] = None,
) -> RenderableType:
    """Compose the whole screen for the controller's current state."""
    from .controller import State

    parts: list[RenderableType] = [Text(APP_TITLE, style=theme.title), Text("")]
    state = controller.state

    if state == State.SEARCH:
        parts.append(Text("Enter a family name to search:"))
        parts.append(controller.text_input.render())
        parts.append(Text(""))
        parts.append(Text("Enter: search | Esc/Ctrl+C: quit", style=theme.help))
    elif state == State.LOADING:
        message = f"Loading data for '{controller.searched_name}'..."
        if spinner is None:
            parts.append(Text(message))
        else:
            spinner.update(text=Text(message), style=theme.spinner)
            parts.append(spinner)
    elif state == State.PROFILE_VIEW:
        parts.append(controller.viewport.render())
        parts.append(Text("↑/↓: scroll | backspace: back to search | Ctrl+C: quit", style=theme.help))
    else:
        parts.append(Text("An error occurred:"))
        parts.append(Text(controller.error_message, style=theme.error))
        parts.append(Text(""))
        parts.append(Text("Press Enter to search again or Esc to quit."))
        parts.append(controller.text_input.render())

    return Padding(Group(*parts), (1, 2))


def _append_pair(text: Text, label: str, value: str, theme: Theme) -> None:
    text.append(f"{label}: ", style=theme.key)
    text.append(value, style=theme.value)


def _append_section(text: Text, title: str, theme: Theme) -> None:
    text.append("\n")
    text.append(title, style=theme.title)
    text.append("\n")
    text.append("-" * RULE_WIDTH)
    text.append("\n")
