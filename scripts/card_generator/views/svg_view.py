#------------------------------------------------------------
#                         svg_view.py
#               Renders SVG documents for the
#              stats card and top languages card.

from typing import List, Mapping, Tuple
from xml.sax.saxutils import escape
from ..models import AccountSnapshot, LanguagePalette, LanguageShare

CARD_WIDTH = 500
CARD_HEIGHT = 240
FONT_FAMILY = "Segoe UI"
TITLE_COLOR = "#ff79c6"
STAT_TEXT_COLOR = "#8be9fd"
LEGEND_TEXT_COLOR = "#ffffff"
MUTED_TEXT_COLOR = "#8b949e"
STATS_GRADIENT = ("#24244a", "#15152a")
LANGUAGES_GRADIENT = ("#1a1b2f", "#12121f")

STAT_ROW_X = 25
STAT_ROW_FIRST_Y = 80
STAT_ROW_SPACING = 30

TOP_LANGUAGE_LIMIT = 6
BAR_X = 30
BAR_Y = 60
BAR_WIDTH = 440
BAR_HEIGHT = 14
LEGEND_ROWS = 3
LEGEND_COLUMN_X = (40, 270)
LEGEND_FIRST_Y = 125
LEGEND_ROW_SPACING = 28
LEGEND_DOT_RADIUS = 6
LEGEND_TEXT_OFFSET = 14
PERCENT_SCALE = 10000

STATS_TITLE_TEMPLATE = "{name}'s GitHub Stats"
LANGUAGES_TITLE = "Most Used Languages"
NO_LANGUAGE_DATA_MESSAGE = "No language data available yet."

STAT_ROWS = (
    ("⭐", "Total Stars Earned", "star_total"),
    ("🕒", "Total Commits", "commit_count"),
    ("🔀", "Total PRs", "pull_request_count"),
    ("❗", "Total Issues", "issue_count"),
    ("📅", "Contributed (last year)", "contribution_calendar_total"),
)

CARD_TEMPLATE = (
    '<svg width="{width}" height="{height}" viewBox="0 0 {width} {height}" xmlns="http://www.w3.org/2000/svg">\n'
    "  <defs>\n"
    '    <linearGradient id="{gradient_id}" x1="0" y1="0" x2="1" y2="1">\n'
    '      <stop offset="0%" stop-color="{gradient_start}"/>\n'
    '      <stop offset="100%" stop-color="{gradient_end}"/>\n'
    "    </linearGradient>\n"
    "  </defs>\n"
    '  <rect width="{width}" height="{height}" rx="16" fill="url(#{gradient_id})"/>\n'
    '  <text x="30" y="38" fill="{title_color}" font-size="22" font-family="{font}" font-weight="bold">{title}</text>\n'
    "{body}"
    "</svg>\n"
)
STAT_GROUP_TEMPLATE = '  <g font-size="17" font-family="{font}" fill="{color}">\n{rows}  </g>\n'
STAT_ROW_TEMPLATE = '    <text x="{x}" y="{y}">{icon} {label}: {value}</text>\n'
BAR_SEGMENT_TEMPLATE = '  <rect x="{x:.2f}" y="{y}" width="{width:.2f}" height="{height}" fill="{color}"/>\n'
LEGEND_ENTRY_TEMPLATE = (
    '  <circle cx="{cx}" cy="{cy}" r="{r}" fill="{color}"/>\n'
    '  <text x="{x}" y="{y}" fill="{text_color}" font-size="15" font-family="{font}">{name} {percent}%</text>\n'
)
EMPTY_LANGUAGES_TEMPLATE = (
    '  <text x="{x}" y="{y}" fill="{color}" font-size="15" font-family="{font}">{message}</text>\n'
)

def _render_card(title: str, gradient: Tuple[str, str], gradient_id: str, body: str) -> str:
    return CARD_TEMPLATE.format(
        width=CARD_WIDTH,
        height=CARD_HEIGHT,
        gradient_id=gradient_id,
        gradient_start=gradient[0],
        gradient_end=gradient[1],
        title_color=TITLE_COLOR,
        font=FONT_FAMILY,
        title=escape(title),
        body=body,
    )

# This function does convert ranked sizes to hundredths of a percent.
# Each share is rounded on its own; exact halves go to the even neighbour.
def _percent_hundredths(sizes: List[int]) -> List[int]:
    total = sum(sizes)
    if total <= 0:
        return [0 for _ in sizes]

    hundredths = []
    for size in sizes:
        quotient, remainder = divmod(size * PERCENT_SCALE, total)
        if 2 * remainder > total or (2 * remainder == total and quotient % 2 == 1):
            quotient += 1
        hundredths.append(quotient)
    return hundredths

# This function does rank languages by byte size and keep the top entries.
# Ties keep input order; percentages are relative to the retained entries only.
def rank_languages(
    language_bytes: Mapping[str, int],
    palette: LanguagePalette,
    limit: int = TOP_LANGUAGE_LIMIT,
) -> List[LanguageShare]:
    ranked = sorted(language_bytes.items(), key=lambda item: item[1], reverse=True)[:limit]
    if sum(size for _, size in ranked) <= 0:
        return []

    percentages = _percent_hundredths([size for _, size in ranked])
    return [
        LanguageShare(name=name, size=size, percent_hundredths=percent, color=palette.color_for(name))
        for (name, size), percent in zip(ranked, percentages)
    ]

# This function does render the account stats card.
# Values are plain decimal text so any number of digits fits.
def render_stats_card(snapshot: AccountSnapshot) -> str:
    rows = "".join(
        STAT_ROW_TEMPLATE.format(
            x=STAT_ROW_X,
            y=STAT_ROW_FIRST_Y + index * STAT_ROW_SPACING,
            icon=icon,
            label=label,
            value=int(getattr(snapshot, attribute)),
        )
        for index, (icon, label, attribute) in enumerate(STAT_ROWS)
    )
    body = STAT_GROUP_TEMPLATE.format(font=FONT_FAMILY, color=STAT_TEXT_COLOR, rows=rows)
    return _render_card(
        STATS_TITLE_TEMPLATE.format(name=snapshot.display_name),
        STATS_GRADIENT,
        "g",
        body,
    )

def _render_stacked_bar(shares: List[LanguageShare]) -> str:
    total = sum(share.size for share in shares)
    segments = []
    offset = 0.0
    for share in shares:
        width = share.size / total * BAR_WIDTH
        segments.append(
            BAR_SEGMENT_TEMPLATE.format(
                x=BAR_X + offset,
                y=BAR_Y,
                width=width,
                height=BAR_HEIGHT,
                color=share.color,
            )
        )
        offset += width
    return "".join(segments)

def _render_legend(shares: List[LanguageShare]) -> str:
    entries = []
    for index, share in enumerate(shares):
        x = LEGEND_COLUMN_X[index // LEGEND_ROWS]
        y = LEGEND_FIRST_Y + (index % LEGEND_ROWS) * LEGEND_ROW_SPACING
        entries.append(
            LEGEND_ENTRY_TEMPLATE.format(
                cx=x,
                cy=y - 5,
                r=LEGEND_DOT_RADIUS,
                color=share.color,
                x=x + LEGEND_TEXT_OFFSET,
                y=y,
                text_color=LEGEND_TEXT_COLOR,
                font=FONT_FAMILY,
                name=escape(share.name),
                percent=share.percent_text,
            )
        )
    return "".join(entries)

# This function does render the most used languages card.
# It draws one stacked bar and a two-column legend, or an empty-state line.
def render_languages_card(language_bytes: Mapping[str, int], palette: LanguagePalette) -> str:
    shares = rank_languages(language_bytes, palette)
    if shares:
        body = _render_stacked_bar(shares) + _render_legend(shares)
    else:
        body = EMPTY_LANGUAGES_TEMPLATE.format(
            x=BAR_X,
            y=BAR_Y + BAR_HEIGHT,
            color=MUTED_TEXT_COLOR,
            font=FONT_FAMILY,
            message=NO_LANGUAGE_DATA_MESSAGE,
        )
    return _render_card(LANGUAGES_TITLE, LANGUAGES_GRADIENT, "bg", body)
