"""Tests for the export module."""

import tempfile
from datetime import datetime
from pathlib import Path

import pandas as pd
import pytest
import yaml

from team_shuffler.export import (
    EXPORTERS,
    MARGIN,
    PAGE_HEIGHT,
    _layout_cards,
    default_filename,
    export_csv,
    export_pdf,
    export_png,
    export_teams,
    export_txt,
    export_yaml,
    format_datetime,
)

TEAMS = [['Alice', 'Bob', 'Charlie'], ['David', 'Eve', 'Frank'], ['Grace']]
GENERATED_AT = datetime(2025, 11, 7, 14, 35)


@pytest.fixture
def output_dir():
    with tempfile.TemporaryDirectory() as tmp:
        yield Path(tmp)


class TestFormatting:
    """Test cases for dates and file names."""

    def test_afternoon(self):
        assert format_datetime(GENERATED_AT) == "November 7, 2025 • 2:35 PM"

    def test_midnight_and_noon(self):
        assert format_datetime(datetime(2024, 1, 3, 0, 5)) == "January 3, 2024 • 12:05 AM"
        assert format_datetime(datetime(2024, 7, 21, 12, 0)) == "July 21, 2024 • 12:00 PM"

    def test_default_filename(self):
        now = datetime(2025, 11, 7, 14, 35, 0, 123000)
        assert default_filename('pdf', now) == f"teams-{int(now.timestamp() * 1000)}.pdf"
        assert default_filename('txt', now).startswith("teams-")


class TestExporters:
    """Test cases for each export format."""

    def test_txt(self, output_dir):
        """Test the plain-text layout."""
        path = export_txt(TEAMS, GENERATED_AT, 3, output_dir / 'teams.txt')
        content = path.read_text(encoding='utf-8')

        assert content.startswith("TeamShuffler Pro\n" + "=" * 30 + "\n\n")
        assert "Generated on: November 7, 2025 • 2:35 PM\n" in content
        assert "Team Size: 3 players per team\n" in content
        assert "Team 1\n" + "-" * 20 + "\n  • Alice\n  • Bob\n  • Charlie\n" in content
        assert "Team 3\n" + "-" * 20 + "\n  • Grace\n" in content

    def test_txt_custom_title(self, output_dir):
        path = export_txt(TEAMS, GENERATED_AT, 3, output_dir / 'teams.txt', title='Pub Quiz')
        assert path.read_text(encoding='utf-8').startswith("Pub Quiz\n")

    def test_csv(self, output_dir):
        """Test that every player gets a row with team number and label."""
        path = export_csv(TEAMS, GENERATED_AT, 3, output_dir / 'teams.csv')
        df = pd.read_csv(path)

        assert list(df.columns) == ['team', 'label', 'name']
        assert len(df) == 7
        assert list(df.iloc[0]) == [1, 'A', 'Alice']
        assert list(df.iloc[5]) == [2, 'C', 'Frank']
        assert list(df.iloc[6]) == [3, 'A', 'Grace']

    def test_yaml(self, output_dir):
        path = export_yaml(TEAMS, GENERATED_AT, 3, output_dir / 'teams.yaml')
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)

        assert data['title'] == 'TeamShuffler Pro'
        assert data['generated_on'] == "November 7, 2025 • 2:35 PM"
        assert data['team_size'] == 3
        assert data['teams'] == {1: TEAMS[0], 2: TEAMS[1], 3: TEAMS[2]}

    def test_pdf(self, output_dir):
        path = export_pdf(TEAMS, GENERATED_AT, 3, output_dir / 'teams.pdf')
        assert path.read_bytes().startswith(b'%PDF')

    def test_pdf_breaks_pages(self):
        """Test that a long assignment spills onto further pages."""
        teams = [[f"P{t}-{i}" for i in range(6)] for t in range(10)]
        pages, _ = _layout_cards(teams, PAGE_HEIGHT)

        assert len(pages) > 1
        placed = [idx for page in pages for idx, _, _ in page]
        assert placed == list(range(10))
        for page in pages:
            assert all(y + 25 + 6 * 9 + 12 <= PAGE_HEIGHT - MARGIN for _, _, y in page)

    def test_png_single_page_layout(self):
        pages, height = _layout_cards(TEAMS, None)
        assert len(pages) == 1
        assert height > PAGE_HEIGHT / 4

    def test_png(self, output_dir):
        path = export_png(TEAMS, GENERATED_AT, 3, output_dir / 'teams.png')
        assert path.read_bytes().startswith(b'\x89PNG\r\n\x1a\n')


class TestExportTeams:
    """Test cases for the export dispatcher."""

    def test_registry(self):
        assert set(EXPORTERS) == {'txt', 'csv', 'yaml', 'pdf', 'png'}

    def test_default_filename_and_directory(self, output_dir):
        """Test that the directory is created and the file is timestamped."""
        target = output_dir / 'nested' / 'exports'
        path = export_teams(TEAMS, 'txt', target, GENERATED_AT, 3)

        assert path.parent == target
        assert path.name == default_filename('txt', GENERATED_AT)
        assert path.exists()

    def test_explicit_filename(self, output_dir):
        path = export_teams(TEAMS, 'csv', output_dir, GENERATED_AT, filename='friday.csv')
        assert path == output_dir / 'friday.csv'
        assert path.exists()

    def test_team_size_defaults_to_first_team(self, output_dir):
        path = export_teams(TEAMS, 'yaml', output_dir, GENERATED_AT)
        with open(path, 'r', encoding='utf-8') as f:
            assert yaml.safe_load(f)['team_size'] == 3

    def test_unknown_format(self, output_dir):
        with pytest.raises(ValueError, match="Unknown export format"):
            export_teams(TEAMS, 'docx', output_dir)
