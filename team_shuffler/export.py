"""Exporters that write a team assignment to TXT, CSV, YAML, PDF or PNG."""

from datetime import datetime
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

import pandas as pd
import yaml

from .partition import member_label

DEFAULT_TITLE = "TeamShuffler Pro"

# Page geometry in millimetres (A4 portrait).
PAGE_WIDTH = 210.0
PAGE_HEIGHT = 297.0
MARGIN = 15.0
HEADER_HEIGHT = 55.0
CARD_PADDING = 8.0
CARD_GAP = 5.0
MM_PER_INCH = 25.4

ELECTRIC_BLUE = "#007AFF"
LIME_GREEN = "#33FF57"
CHARCOAL = "#1C1C1C"
LIGHT_BLUE = "#E6F0FF"
MUTED_GREY = "#646464"


def format_datetime(dt: datetime) -> str:
    """Format a generation time like ``November 7, 2025 • 2:35 PM``."""
    hour = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    return f"{dt.strftime('%B')} {dt.day}, {dt.year} • {hour}:{dt.minute:02d} {meridiem}"


def default_filename(fmt: str, now: Optional[datetime] = None) -> str:
    """File name for an export, stamped with epoch milliseconds."""
    now = now or datetime.now()
    return f"teams-{int(now.timestamp() * 1000)}.{fmt}"


def _players_label(count: int) -> str:
    return f"{count} {'player' if count == 1 else 'players'}"


def export_txt(
    teams: List[List[str]],
    generated_at: datetime,
    team_size: int,
    output_path: Path,
    title: str = DEFAULT_TITLE
) -> Path:
    """Write the teams as a plain-text listing."""
    lines = [
        title,
        "=" * 30,
        "",
        f"Generated on: {format_datetime(generated_at)}",
        f"Team Size: {team_size} players per team",
        "",
        "=" * 30,
        "",
    ]
    for number, team in enumerate(teams, start=1):
        lines.append(f"Team {number}")
        lines.append("-" * 20)
        lines.extend(f"  • {name}" for name in team)
        lines.append("")

    with open(output_path, 'w', encoding='utf-8') as f:
        f.write("\n".join(lines) + "\n")
    return output_path


def export_csv(
    teams: List[List[str]],
    generated_at: datetime,
    team_size: int,
    output_path: Path,
    title: str = DEFAULT_TITLE
) -> Path:
    """Write one row per player with the team number and member label."""
    rows = [
        (number, member_label(idx), name)
        for number, team in enumerate(teams, start=1)
        for idx, name in enumerate(team)
    ]
    df = pd.DataFrame(rows, columns=['team', 'label', 'name'])
    df.to_csv(output_path, index=False)
    return output_path


def export_yaml(
    teams: List[List[str]],
    generated_at: datetime,
    team_size: int,
    output_path: Path,
    title: str = DEFAULT_TITLE
) -> Path:
    """Write the teams as YAML keyed by team number."""
    yaml_data = {
        'title': title,
        'generated_on': format_datetime(generated_at),
        'team_size': team_size,
        'teams': {number: list(team) for number, team in enumerate(teams, start=1)},
    }

    with open(output_path, 'w', encoding='utf-8') as f:
        yaml.dump(yaml_data, f, default_flow_style=False, sort_keys=True, allow_unicode=True)
    return output_path


def _card_height(team: List[str]) -> float:
    return 25 + len(team) * 9 + 12


def _layout_cards(
    teams: List[List[str]],
    page_height: Optional[float]
) -> Tuple[List[List[Tuple[int, float, float]]], float]:
    """Place team cards in a two-column grid.

    Returns the pages, each a list of ``(team index, x, y)`` positions, and
    the height actually used by the last page. Without a ``page_height``
    everything goes on a single page.
    """
    card_width = (PAGE_WIDTH - MARGIN * 3) / 2
    pages: List[List[Tuple[int, float, float]]] = [[]]
    y = HEADER_HEIGHT + 10

    for row_start in range(0, len(teams), 2):
        row = teams[row_start:row_start + 2]
        row_height = max(_card_height(team) for team in row) + CARD_GAP
        if page_height is not None and pages[-1] and y + row_height > page_height - MARGIN:
            pages.append([])
            y = MARGIN
        for col, _ in enumerate(row):
            pages[-1].append((row_start + col, MARGIN + col * (card_width + MARGIN), y))
        y += row_height

    return pages, y + MARGIN


def _draw_header(ax, title: str, generated_at: datetime, team_size: int) -> None:
    from matplotlib.patches import Rectangle

    ax.add_patch(Rectangle((0, 0), PAGE_WIDTH, HEADER_HEIGHT, facecolor=CHARCOAL, edgecolor='none'))
    ax.text(PAGE_WIDTH / 2, 28, title, ha='center', va='baseline',
            color=ELECTRIC_BLUE, fontsize=26, fontweight='bold')
    ax.text(PAGE_WIDTH / 2, 38, f"Generated on: {format_datetime(generated_at)}",
            ha='center', va='baseline', color='white', fontsize=11)
    ax.text(PAGE_WIDTH / 2, 45, f"Team Size: {team_size} players per team",
            ha='center', va='baseline', color=LIME_GREEN, fontsize=10)


def _draw_card(ax, team: List[str], number: int, x: float, y: float) -> None:
    from matplotlib.patches import Circle, Rectangle

    width = (PAGE_WIDTH - MARGIN * 3) / 2
    height = _card_height(team)

    ax.add_patch(Rectangle((x, y), width, height, facecolor='white',
                           edgecolor=ELECTRIC_BLUE, linewidth=0.8 * 72 / MM_PER_INCH))
    ax.add_patch(Rectangle((x, y), width, 15, facecolor=ELECTRIC_BLUE, edgecolor='none'))
    ax.text(x + CARD_PADDING, y + 10, f"Team {number}", va='baseline',
            color='white', fontsize=14, fontweight='bold')
    ax.add_patch(Circle((x + width - 12, y + 7.5), 3, facecolor=LIME_GREEN, edgecolor='none'))

    current_y = y + 18
    for idx, name in enumerate(team):
        ax.add_patch(Rectangle((x + CARD_PADDING, current_y), width - CARD_PADDING * 2, 8,
                               facecolor=LIGHT_BLUE, edgecolor='none'))
        ax.text(x + CARD_PADDING + 2, current_y + 6, member_label(idx), va='baseline',
                color=LIME_GREEN, fontsize=10, fontweight='bold')
        ax.text(x + CARD_PADDING + 8, current_y + 6, name, va='baseline',
                color=CHARCOAL, fontsize=10)
        current_y += 9

    current_y += 3
    ax.plot([x + CARD_PADDING, x + width - CARD_PADDING], [current_y, current_y],
            color=ELECTRIC_BLUE, linewidth=0.3 * 72 / MM_PER_INCH)
    current_y += 6
    ax.text(x + width / 2, current_y, _players_label(len(team)), ha='center',
            va='baseline', color=MUTED_GREY, fontsize=8)


def _pyplot():
    import matplotlib
    matplotlib.use('Agg')
    import matplotlib.pyplot as plt
    return plt


def _new_page(height: float, facecolor: str):
    plt = _pyplot()

    fig = plt.figure(figsize=(PAGE_WIDTH / MM_PER_INCH, height / MM_PER_INCH), facecolor=facecolor)
    ax = fig.add_axes([0, 0, 1, 1])
    ax.set_xlim(0, PAGE_WIDTH)
    ax.set_ylim(height, 0)
    ax.set_facecolor(facecolor)
    ax.axis('off')
    return fig, ax


def export_pdf(
    teams: List[List[str]],
    generated_at: datetime,
    team_size: int,
    output_path: Path,
    title: str = DEFAULT_TITLE
) -> Path:
    """Write the teams as A4 pages of cards, header on the first page."""
    plt = _pyplot()
    from matplotlib.backends.backend_pdf import PdfPages

    pages, _ = _layout_cards(teams, PAGE_HEIGHT)
    with PdfPages(output_path) as pdf:
        for page_number, placements in enumerate(pages):
            fig, ax = _new_page(PAGE_HEIGHT, 'white')
            try:
                if page_number == 0:
                    _draw_header(ax, title, generated_at, team_size)
                for idx, x, y in placements:
                    _draw_card(ax, teams[idx], idx + 1, x, y)
                pdf.savefig(fig)
            finally:
                plt.close(fig)
    return output_path


def export_png(
    teams: List[List[str]],
    generated_at: datetime,
    team_size: int,
    output_path: Path,
    title: str = DEFAULT_TITLE
) -> Path:
    """Write all team cards as a single image on a dark background."""
    plt = _pyplot()

    pages, used_height = _layout_cards(teams, None)
    height = max(used_height, HEADER_HEIGHT + MARGIN)
    fig, ax = _new_page(height, CHARCOAL)
    try:
        _draw_header(ax, title, generated_at, team_size)
        for idx, x, y in pages[0]:
            _draw_card(ax, teams[idx], idx + 1, x, y)
        fig.savefig(output_path, format='png', dpi=150, facecolor=CHARCOAL)
    finally:
        plt.close(fig)
    return output_path


Exporter = Callable[[List[List[str]], datetime, int, Path, str], Path]

EXPORTERS: Dict[str, Exporter] = {
    'txt': export_txt,
    'csv': export_csv,
    'yaml': export_yaml,
    'pdf': export_pdf,
    'png': export_png,
}


def export_teams(
    teams: List[List[str]],
    fmt: str,
    output_dir: Path,
    generated_at: Optional[datetime] = None,
    team_size: Optional[int] = None,
    title: str = DEFAULT_TITLE,
    filename: Optional[str] = None
) -> Path:
    """Export teams in the given format into ``output_dir``.

    Args:
        teams: Teams to export
        fmt: One of the keys of ``EXPORTERS``
        output_dir: Directory to write into; created if missing
        generated_at: Generation time shown on the export; defaults to now
        team_size: Requested team size; defaults to the first team's size
        title: Heading used by the document formats
        filename: Explicit file name instead of ``teams-<ms>.<fmt>``

    Returns:
        Path of the written file

    Raises:
        ValueError: If the format is unknown
    """
    if fmt not in EXPORTERS:
        raise ValueError(f"Unknown export format '{fmt}'. Expected one of {sorted(EXPORTERS)}")

    generated_at = generated_at or datetime.now()
    if team_size is None:
        team_size = len(teams[0]) if teams else 0

    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / (filename or default_filename(fmt, generated_at))
    return EXPORTERS[fmt](teams, generated_at, team_size, output_path, title)
