"""Text rendering of repository info and the language bar chart.

Every function here is pure: it takes the fetched data, a terminal width
and the :class:`RenderSettings`, and returns ``rich`` ``Text`` lines. Printing
is left to the caller.
"""

from typing import Optional

from rich.text import Text

from repo_info.config import DEFAULT_SETTINGS, RenderSettings
from repo_info.models import LanguageShare, LanguageStats, RepositoryInfo

NO_LANGUAGES = "No languages found"


# ── Math ──────────────────────────────────────────────────────────────────

def percentage(total: int, count: int) -> str:
    """``count`` as a share of ``total``, e.g. ``"37.42%"``."""
    if total == 0:
        return "0.00%"
    return f"{count / total * 100:.2f}%"


def drawable_width(width: Optional[int], settings: RenderSettings = DEFAULT_SETTINGS) -> int:
    """Columns left for the bar once the name and percentage columns are reserved."""
    if width is None:
        width = settings.fallback_width
    if width < settings.text_width:
        return settings.min_bar_width
    return width - settings.text_width


def bar_length(total: int, count: int, bar_width: int) -> int:
    """Bar length proportional to ``count / total``, truncated."""
    if total == 0:
        return 0
    return count * bar_width // total


def language_shares(
    languages: LanguageStats,
    width: Optional[int],
    settings: RenderSettings = DEFAULT_SETTINGS,
) -> list[LanguageShare]:
    """Compute one chart row per language, largest first."""
    total = languages.total
    bar_width = drawable_width(width, settings)
    return [
        LanguageShare(
            name=name,
            byte_count=count,
            percentage=percentage(total, count),
            bar_length=bar_length(total, count, bar_width),
        )
        for name, count in languages.ordered()
    ]


# ── Lines ─────────────────────────────────────────────────────────────────

def render_languages(
    languages: LanguageStats,
    width: Optional[int],
    settings: RenderSettings = DEFAULT_SETTINGS,
) -> list[Text]:
    if not len(languages):
        return [Text(NO_LANGUAGES)]

    name_w = settings.name_width
    pct_w = settings.percentage_width
    lines = [Text("Languages:")]
    for share in language_shares(languages, width, settings):
        lines.append(
            Text.assemble(
                f"{share.name:<{name_w}.{name_w}}",
                "  ",
                (f"{share.percentage:>{pct_w}}", "red"),
                "  ",
                (settings.bar_char * share.bar_length, "green"),
            )
        )
    return lines


def render_info(
    info: RepositoryInfo,
    width: Optional[int],
    settings: RenderSettings = DEFAULT_SETTINGS,
) -> list[Text]:
    """Header line plus one labeled line per field."""
    if width is None:
        width = settings.fallback_width

    fields = [
        ("Full Name", info.full_name),
        ("Description", info.description or ""),
        ("Language", info.language or ""),
        ("Default branch", info.default_branch),
        ("Stars", str(info.stargazers_count)),
        ("Size", str(info.size)),
        ("Forks", str(info.forks)),
        ("Open issues", str(info.open_issues)),
        ("Last updated", info.updated_at),
        ("Link", info.html_url),
    ]
    lines = [Text(info.name.ljust(width), style="red on white")]
    lines.extend(Text.assemble(f"{label}: ", (value, "red")) for label, value in fields)
    return lines
